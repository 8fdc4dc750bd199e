import pytest
import pytest_asyncio

from shared.models import Avatar, UserRole
from modules.auth.passwords import verify_password
from modules.users.exceptions import DuplicateEmailError, InvalidPasswordError, UserNotFoundError
from modules.users.service import UserService

TEST_PASSWORD = "correct-horse"


@pytest.fixture
def service(user_repo, sessions):
    return UserService(user_repo, sessions)


@pytest_asyncio.fixture
async def session_user(auth_service, create_user):
    """A logged-in user as the session gate would resolve it."""
    create_user()
    session = await auth_service.login("test@example.com", TEST_PASSWORD)
    return session.user


class TestGetUserInfo:
    @pytest.mark.asyncio
    async def test_reads_session_snapshot(self, service, session_user):
        user = await service.get_user_info(session_user.id)
        assert user.email == "test@example.com"

    @pytest.mark.asyncio
    async def test_no_session(self, service):
        with pytest.raises(UserNotFoundError):
            await service.get_user_info("user-123")


class TestUpdateUserInfo:
    @pytest.mark.asyncio
    async def test_updates_store_and_session(self, service, session_user, user_repo, sessions):
        updated = await service.update_user_info(session_user, name="Grace")

        assert updated.name == "Grace"
        assert user_repo.get_by_id(session_user.id).name == "Grace"
        cached = await sessions.get(session_user.id)
        assert cached.name == "Grace"
        assert cached.password is not None

    @pytest.mark.asyncio
    async def test_duplicate_email(self, service, session_user, create_user):
        create_user(email="taken@example.com")
        with pytest.raises(DuplicateEmailError):
            await service.update_user_info(session_user, email="taken@example.com")

    @pytest.mark.asyncio
    async def test_same_email_is_not_a_conflict(self, service, session_user):
        user = await service.update_user_info(session_user, email="TEST@example.com")
        assert user.email == "test@example.com"

    @pytest.mark.asyncio
    async def test_nothing_to_change(self, service, session_user):
        assert await service.update_user_info(session_user) is session_user


class TestUpdatePassword:
    @pytest.mark.asyncio
    async def test_changes_password(self, service, session_user, user_repo, auth_service):
        await service.update_password(session_user, TEST_PASSWORD, "new-secret")

        stored = user_repo.get_by_id(session_user.id, include_password=True)
        assert verify_password(stored.password, "new-secret")
        session = await auth_service.login("test@example.com", "new-secret")
        assert session.user.id == session_user.id

    @pytest.mark.asyncio
    async def test_wrong_old_password(self, service, session_user):
        with pytest.raises(InvalidPasswordError, match="Invalid old password"):
            await service.update_password(session_user, "wrong", "new-secret")

    @pytest.mark.asyncio
    async def test_social_account_has_no_password(self, service, auth_service):
        session = await auth_service.social_auth("social@example.com", "Social")
        with pytest.raises(InvalidPasswordError, match="not set"):
            await service.update_password(session.user, "", "new-secret")


class TestUpdateAvatar:
    @pytest.mark.asyncio
    async def test_updates_avatar(self, service, session_user, sessions):
        avatar = Avatar(public_id="avatars/1", url="https://img/1.png")
        updated = await service.update_avatar(session_user, avatar)

        assert updated.avatar == avatar
        assert (await sessions.get(session_user.id)).avatar == avatar


class TestAdminOperations:
    @pytest.mark.asyncio
    async def test_list_users(self, service, create_user):
        create_user(email="a@example.com")
        create_user(email="b@example.com")
        users = await service.list_users()
        assert {u.email for u in users} == {"a@example.com", "b@example.com"}
        assert all(u.password is None for u in users)

    @pytest.mark.asyncio
    async def test_update_role_rewrites_live_session(self, service, session_user, sessions):
        updated = await service.update_user_role(session_user.id, UserRole.ADMIN)

        assert updated.role == UserRole.ADMIN
        cached = await sessions.get(session_user.id)
        assert cached.role == UserRole.ADMIN
        assert cached.password is not None

    @pytest.mark.asyncio
    async def test_update_role_does_not_create_session(self, service, create_user, sessions):
        user = create_user()
        await service.update_user_role(user.id, UserRole.ADMIN)
        assert await sessions.get(user.id) is None

    @pytest.mark.asyncio
    async def test_update_role_unknown_user(self, service):
        with pytest.raises(UserNotFoundError):
            await service.update_user_role("missing", UserRole.ADMIN)

    @pytest.mark.asyncio
    async def test_delete_user_ends_session(self, service, session_user, user_repo, sessions):
        await service.delete_user(session_user.id)

        assert user_repo.get_by_id(session_user.id) is None
        assert await sessions.get(session_user.id) is None

    @pytest.mark.asyncio
    async def test_delete_unknown_user(self, service):
        with pytest.raises(UserNotFoundError):
            await service.delete_user("missing")
