"""Domain layer DI providers."""

from dishka import Scope, provide

from pharmqa.config import AuthSettings
from pharmqa.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
    VoteRepository,
)
from pharmqa.domain.service import (
    AnswerService,
    CommentService,
    CounterService,
    JWTService,
    QuestionService,
    VoteService,
)
from pharmqa.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances sharing one transaction, so a
    vote change and its counter delta commit or roll back together.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_question_service(
        self, question_repository: QuestionRepository
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(question_repository=question_repository)

    @provide
    def get_answer_service(self, answer_repository: AnswerRepository) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(answer_repository=answer_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_counter_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        vote_repository: VoteRepository,
    ) -> CounterService:
        """Provide denormalized counter domain service."""
        return CounterService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            vote_repository=vote_repository,
        )

    @provide
    def get_vote_service(
        self, vote_repository: VoteRepository, counter_service: CounterService
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository, counter_service=counter_service
        )
