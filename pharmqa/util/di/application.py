"""Application layer DI providers."""

from dishka import Scope, provide

from pharmqa.application.usecase.answer import (
    CreateAnswerUseCase,
    DeleteAnswerUseCase,
    ListAnswersUseCase,
    UpdateAnswerUseCase,
)
from pharmqa.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
)
from pharmqa.application.usecase.question import (
    CreateQuestionUseCase,
    DeleteQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
    UpdateQuestionUseCase,
)
from pharmqa.application.usecase.user import (
    ListMyAnswersUseCase,
    ListMyCommentsUseCase,
    ListMyQuestionsUseCase,
)
from pharmqa.application.usecase.vote import CastVoteUseCase, GetVoteStateUseCase
from pharmqa.config import ForumSettings
from pharmqa.domain.service import (
    AnswerService,
    CommentService,
    CounterService,
    QuestionService,
    VoteService,
)
from pharmqa.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_create_question_use_case(
        self, question_service: QuestionService
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(question_service=question_service)

    @provide(scope=Scope.REQUEST)
    def get_get_question_use_case(
        self, question_service: QuestionService, vote_service: VoteService
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(
            question_service=question_service, vote_service=vote_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        vote_service: VoteService,
        forum_settings: ForumSettings,
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(
            question_service=question_service,
            answer_service=answer_service,
            vote_service=vote_service,
            forum_settings=forum_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_question_use_case(
        self, question_service: QuestionService, vote_service: VoteService
    ) -> UpdateQuestionUseCase:
        """Provide update question use case."""
        return UpdateQuestionUseCase(
            question_service=question_service, vote_service=vote_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_question_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> DeleteQuestionUseCase:
        """Provide delete question use case."""
        return DeleteQuestionUseCase(
            question_service=question_service,
            answer_service=answer_service,
            comment_service=comment_service,
            vote_service=vote_service,
        )

    # Answer use cases
    @provide(scope=Scope.REQUEST)
    def get_create_answer_use_case(
        self, answer_service: AnswerService, question_service: QuestionService
    ) -> CreateAnswerUseCase:
        """Provide create answer use case."""
        return CreateAnswerUseCase(
            answer_service=answer_service, question_service=question_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_answers_use_case(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        vote_service: VoteService,
        forum_settings: ForumSettings,
    ) -> ListAnswersUseCase:
        """Provide list answers use case."""
        return ListAnswersUseCase(
            answer_service=answer_service,
            question_service=question_service,
            vote_service=vote_service,
            forum_settings=forum_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_answer_use_case(
        self, answer_service: AnswerService, vote_service: VoteService
    ) -> UpdateAnswerUseCase:
        """Provide update answer use case."""
        return UpdateAnswerUseCase(
            answer_service=answer_service, vote_service=vote_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_answer_use_case(
        self,
        answer_service: AnswerService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> DeleteAnswerUseCase:
        """Provide delete answer use case."""
        return DeleteAnswerUseCase(
            answer_service=answer_service,
            comment_service=comment_service,
            vote_service=vote_service,
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        answer_service: AnswerService,
        counter_service: CounterService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            answer_service=answer_service,
            counter_service=counter_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService, answer_service: AnswerService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service, answer_service=answer_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService, counter_service: CounterService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, counter_service=counter_service
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_get_vote_state_use_case(
        self, vote_service: VoteService
    ) -> GetVoteStateUseCase:
        """Provide get vote state use case."""
        return GetVoteStateUseCase(vote_service=vote_service)

    # Current user's content
    @provide(scope=Scope.REQUEST)
    def get_list_my_questions_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        forum_settings: ForumSettings,
    ) -> ListMyQuestionsUseCase:
        """Provide list my questions use case."""
        return ListMyQuestionsUseCase(
            question_service=question_service,
            answer_service=answer_service,
            forum_settings=forum_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_my_answers_use_case(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        forum_settings: ForumSettings,
    ) -> ListMyAnswersUseCase:
        """Provide list my answers use case."""
        return ListMyAnswersUseCase(
            answer_service=answer_service,
            question_service=question_service,
            forum_settings=forum_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_my_comments_use_case(
        self,
        comment_service: CommentService,
        answer_service: AnswerService,
        forum_settings: ForumSettings,
    ) -> ListMyCommentsUseCase:
        """Provide list my comments use case."""
        return ListMyCommentsUseCase(
            comment_service=comment_service,
            answer_service=answer_service,
            forum_settings=forum_settings,
        )
