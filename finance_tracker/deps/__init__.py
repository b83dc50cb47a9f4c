from dishka import AsyncContainer, Provider, Scope, make_async_container
from dishka.integrations.fastapi import FastapiProvider
from pydantic_settings import BaseSettings

from finance_tracker.deps.auth import AuthServicesProvider
from finance_tracker.deps.db import DbConnectionProvider
from finance_tracker.services.profile import ProfileServicesProvider
from finance_tracker.services.providers.password_encoder import BcryptPasswordEncoder
from finance_tracker.services.providers.protocols.password_encoder import IPasswordEncoder
from finance_tracker.services.providers.protocols.token_provider import ITokenProvider
from finance_tracker.services.providers.token_provider import JwtTokenProvider
from finance_tracker.services.transactions import TransactionServicesProvider
from finance_tracker.services.users import UserServicesProvider
from finance_tracker.settings.app import AppSettings
from finance_tracker.settings.db import DatabaseSettings


class AppProvider(Provider):
    def register_settings[S: BaseSettings](
        self, settings: type[S], instance: S | None = None
    ):
        if instance is not None:
            self.provide(lambda: instance, scope=Scope.APP, provides=settings)
        else:
            self.provide(lambda: settings(), scope=Scope.APP, provides=settings)


def create_container(
    *extra_providers: Provider, app_settings: AppSettings | None = None
) -> AsyncContainer:
    """Build the application container.

    ``app_settings`` replaces the environment-loaded ``AppSettings``.
    Providers passed in ``extra_providers`` come last and override the
    defaults for the types they provide.
    """
    provider = AppProvider()
    provider.register_settings(DatabaseSettings)
    provider.register_settings(AppSettings, app_settings)

    provider.provide(BcryptPasswordEncoder, provides=IPasswordEncoder, scope=Scope.APP)
    provider.provide(JwtTokenProvider, provides=ITokenProvider, scope=Scope.APP)

    container = make_async_container(
        provider,
        DbConnectionProvider(),
        AuthServicesProvider(),
        UserServicesProvider(),
        TransactionServicesProvider(),
        ProfileServicesProvider(),
        FastapiProvider(),
        *extra_providers,
    )
    return container
