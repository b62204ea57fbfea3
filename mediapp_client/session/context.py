"""
Session context: authentication state, login/registration/logout and the
currently known user profile.
"""

from typing import Optional

from ..core.enums import ProfileLoading, SessionState
from ..core.exceptions import GatewayError, LoginResponseError
from ..core.models import LoginCredentials, PatientRegistration, User
from ..services.auth import AuthService
from ..services.tokens import TokenStore
from ..services.users import UsersService
from ..utils.logging import get_logger

logger = get_logger("mediapp.session")


class SessionContext:
    """
    Owns the session for presentation collaborators.

    States: UNAUTHENTICATED (no token, no profile), PENDING_PROFILE (token, no
    profile) and AUTHENTICATED (profile loaded). ``profile_loading`` selects
    how profile-fetch failures are treated:

    - EAGER: the profile is fetched on login and startup; a failed fetch
      clears the tokens.
    - DEFERRED: the profile is fetched only on request; a failed fetch leaves
      the tokens in place and a token alone counts as authenticated.
    """

    def __init__(
        self,
        auth: AuthService,
        users: UsersService,
        token_store: TokenStore,
        profile_loading: ProfileLoading = ProfileLoading.DEFERRED,
    ):
        self.auth = auth
        self.users = users
        self.token_store = token_store
        self.profile_loading = ProfileLoading(profile_loading)
        self.user: Optional[User] = None
        self.is_loading = True

    @property
    def state(self) -> SessionState:
        if self.user is not None:
            return SessionState.AUTHENTICATED
        if self.token_store.get().access_token:
            return SessionState.PENDING_PROFILE
        return SessionState.UNAUTHENTICATED

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None or bool(self.token_store.get().access_token)

    async def initialize(self) -> SessionState:
        """Derive the startup state from persisted tokens."""
        try:
            if self.token_store.get().access_token:
                logger.info("Resuming session from stored token")
                if self.profile_loading == ProfileLoading.EAGER:
                    await self.fetch_user()
        finally:
            self.is_loading = False
        return self.state

    async def login(self, credentials: LoginCredentials) -> SessionState:
        """
        Log in and store the issued tokens.

        Raises:
            GatewayError: the login request failed
            LoginResponseError: the response carried no access token
        """
        tokens = await self.auth.login(credentials)
        if not tokens.access_token:
            raise LoginResponseError("Login response did not include an access token")

        self.token_store.set(tokens.access_token, tokens.refresh_token)
        self.user = None
        logger.info("Logged in; profile loading is %s", self.profile_loading.value)

        if self.profile_loading == ProfileLoading.EAGER:
            await self.fetch_user()
        return self.state

    async def register(self, data: PatientRegistration) -> SessionState:
        """Register a patient account, then log in with the same credentials."""
        await self.users.register_patient(data)
        return await self.login(LoginCredentials(email=data.email, password=data.password))

    async def fetch_user(self) -> Optional[User]:
        """
        Load the current user's profile.

        Gateway failures are not raised; they move the session according to
        ``profile_loading`` and ``None`` is returned.
        """
        try:
            user = await self.users.get_profile()
        except GatewayError as e:
            self.user = None
            if self.profile_loading == ProfileLoading.EAGER:
                logger.warning("Profile fetch failed, signing out: %s", e)
                self.token_store.clear()
            else:
                logger.warning("Profile fetch failed, keeping token session: %s", e)
            return None

        self.user = user
        logger.info("Profile loaded for user %s", user.user_id)
        return user

    async def ensure_user(self) -> Optional[User]:
        """Return the loaded profile, fetching it first if needed."""
        if self.user is not None:
            return self.user
        if not self.token_store.get().access_token:
            return None
        return await self.fetch_user()

    def logout(self) -> None:
        self.token_store.clear()
        self.user = None
        logger.info("Logged out")
