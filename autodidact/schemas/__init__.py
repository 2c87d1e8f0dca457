from autodidact.schemas.access import (
    AccessStatusSchema,
    LoginSchema,
    ProfileUpdateResultSchema,
    ProfileUpdateSchema,
    RegisterSchema,
    UserOutSchema,
)
from autodidact.schemas.community import CommunityQuestionCreateSchema, CommunityQuestionOutSchema
from autodidact.schemas.practice_session import SessionCreateSchema, SessionOutSchema
from autodidact.schemas.question import (
    AnswerAnalysisSchema,
    AnswerAnalyzeSchema,
    AnswerFeedbackSchema,
    AnswerOutSchema,
    AnswerSubmitSchema,
    QuestionOutSchema,
    QuestionValidateSchema,
    QuestionValidationSchema,
)

__all__ = [
    "AccessStatusSchema",
    "AnswerAnalysisSchema",
    "AnswerAnalyzeSchema",
    "AnswerFeedbackSchema",
    "AnswerOutSchema",
    "AnswerSubmitSchema",
    "CommunityQuestionCreateSchema",
    "CommunityQuestionOutSchema",
    "LoginSchema",
    "ProfileUpdateResultSchema",
    "ProfileUpdateSchema",
    "QuestionOutSchema",
    "QuestionValidateSchema",
    "QuestionValidationSchema",
    "RegisterSchema",
    "SessionCreateSchema",
    "SessionOutSchema",
    "UserOutSchema",
]
