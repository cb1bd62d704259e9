"""Application layer DI providers."""

from dishka import Scope, provide

from discuss.util.di.base import ProviderBase
from discuss.application.usecase.comment import (
    CommentEngine,
    CreateCommentUseCase,
    DeleteCommentUseCase,
    FlagCommentUseCase,
    GetCommentUseCase,
    ListCommentsUseCase,
    ListFlagsUseCase,
    UnflagCommentUseCase,
    UpdateCommentUseCase,
)
from discuss.domain.service import (
    CommentQueryService,
    CommentService,
    FlagService,
    SnippetGuard,
)


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, snippet_guard: SnippetGuard, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            snippet_guard=snippet_guard, comment_service=comment_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, snippet_guard: SnippetGuard, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            snippet_guard=snippet_guard, comment_service=comment_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, snippet_guard: SnippetGuard, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            snippet_guard=snippet_guard, comment_service=comment_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self, snippet_guard: SnippetGuard, comment_service: CommentService
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(
            snippet_guard=snippet_guard, comment_service=comment_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, snippet_guard: SnippetGuard, comment_query_service: CommentQueryService
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            snippet_guard=snippet_guard, comment_query_service=comment_query_service
        )

    # Flag use cases
    @provide(scope=Scope.REQUEST)
    def get_flag_comment_use_case(
        self,
        snippet_guard: SnippetGuard,
        comment_service: CommentService,
        flag_service: FlagService,
    ) -> FlagCommentUseCase:
        """Provide flag comment use case."""
        return FlagCommentUseCase(
            snippet_guard=snippet_guard,
            comment_service=comment_service,
            flag_service=flag_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_unflag_comment_use_case(
        self, flag_service: FlagService
    ) -> UnflagCommentUseCase:
        """Provide unflag comment use case."""
        return UnflagCommentUseCase(flag_service=flag_service)

    @provide(scope=Scope.REQUEST)
    def get_list_flags_use_case(self, flag_service: FlagService) -> ListFlagsUseCase:
        """Provide list flags use case."""
        return ListFlagsUseCase(flag_service=flag_service)

    # Facade
    @provide(scope=Scope.REQUEST)
    def get_comment_engine(
        self,
        create_comment: CreateCommentUseCase,
        update_comment: UpdateCommentUseCase,
        delete_comment: DeleteCommentUseCase,
        get_comment: GetCommentUseCase,
        list_comments: ListCommentsUseCase,
        flag_comment: FlagCommentUseCase,
        unflag_comment: UnflagCommentUseCase,
        list_flags: ListFlagsUseCase,
    ) -> CommentEngine:
        """Provide the comment engine facade."""
        return CommentEngine(
            create_comment=create_comment,
            update_comment=update_comment,
            delete_comment=delete_comment,
            get_comment=get_comment,
            list_comments=list_comments,
            flag_comment=flag_comment,
            unflag_comment=unflag_comment,
            list_flags=list_flags,
        )
