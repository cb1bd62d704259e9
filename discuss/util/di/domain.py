"""Domain layer DI providers."""

from dishka import Scope, provide

from discuss.config import AuthSettings, CommentSettings
from discuss.domain.repository import CommentRepository, FlagRepository, SnippetAccess
from discuss.domain.service import (
    CommentQueryService,
    CommentService,
    FlagService,
    JWTService,
    PermissionService,
    ReplyCounter,
    SnippetGuard,
    ThreadService,
)
from discuss.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_permission_service(
        self, comment_settings: CommentSettings
    ) -> PermissionService:
        """Provide ownership/role checks."""
        return PermissionService(admin_roles=comment_settings.admin_roles)

    @provide
    def get_snippet_guard(self, snippet_access: SnippetAccess) -> SnippetGuard:
        """Provide snippet read guard."""
        return SnippetGuard(snippet_access=snippet_access)

    @provide
    def get_thread_service(self, comment_repository: CommentRepository) -> ThreadService:
        """Provide thread placement service."""
        return ThreadService(comment_repository=comment_repository)

    @provide
    def get_reply_counter(self, comment_repository: CommentRepository) -> ReplyCounter:
        """Provide reply counter."""
        return ReplyCounter(comment_repository=comment_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        thread_service: ThreadService,
        reply_counter: ReplyCounter,
        permission_service: PermissionService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            thread_service=thread_service,
            reply_counter=reply_counter,
            permission_service=permission_service,
        )

    @provide
    def get_comment_query_service(
        self, comment_repository: CommentRepository, comment_settings: CommentSettings
    ) -> CommentQueryService:
        """Provide comment listing service."""
        return CommentQueryService(
            comment_repository=comment_repository, settings=comment_settings
        )

    @provide
    def get_flag_service(
        self,
        flag_repository: FlagRepository,
        comment_repository: CommentRepository,
        permission_service: PermissionService,
    ) -> FlagService:
        """Provide flag domain service."""
        return FlagService(
            flag_repository=flag_repository,
            comment_repository=comment_repository,
            permission_service=permission_service,
        )
