import pytest

from modules.auth.interfaces import IAuthService
from modules.auth.service import AuthService

METHODS = ["register", "activate", "login", "social_auth", "logout", "authenticate", "refresh"]


class TestAuthInterface:
    def test_interface_methods_exist(self):
        """IAuthService should define the session lifecycle."""
        for method in METHODS:
            assert hasattr(IAuthService, method)

    def test_auth_service_has_interface_methods(self):
        """AuthService should have all IAuthService methods."""
        for method in METHODS:
            assert hasattr(AuthService, method)
            assert callable(getattr(AuthService, method))

    def test_service_instance_satisfies_protocol(self, auth_service):
        assert isinstance(auth_service, IAuthService)
