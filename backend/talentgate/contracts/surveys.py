"""Survey contracts — candidate experience survey definitions and responses."""

from enum import Enum

from talentgate.validators import (
    ArrayMinSize,
    Each,
    IsArray,
    IsBoolean,
    IsEnum,
    IsNumber,
    IsString,
    Length,
    Nested,
    ShapeDefinition,
    field,
    optional,
)


class SurveyTriggerType(str, Enum):
    POST_APPLICATION = "post_application"
    POST_INTERVIEW = "post_interview"
    POST_REJECTION = "post_rejection"
    POST_OFFER = "post_offer"
    MANUAL = "manual"


class SurveyQuestionType(str, Enum):
    NPS = "nps"
    RATING = "rating"
    TEXT = "text"
    MULTIPLE_CHOICE = "multiple_choice"
    YES_NO = "yes_no"


SURVEY_QUESTION = ShapeDefinition(
    "survey_question",
    field("id", IsString()),
    field("type", IsEnum(SurveyQuestionType)),
    field("question", IsString()),
    field("required", IsBoolean()),
    optional("options", IsArray(), Each(IsString())),
    field("order", IsNumber()),
    description="One question of a survey definition",
)

CREATE_SURVEY = ShapeDefinition(
    "create_survey",
    field("name", IsString()),
    optional("description", IsString()),
    field("triggerType", IsEnum(SurveyTriggerType)),
    field("questions", IsArray(), Each(Nested(SURVEY_QUESTION))),
    optional("active", IsBoolean()),
    optional("sendDelayHours", IsNumber()),
    description="Define a survey and the hiring event that sends it",
)

QUESTION_ANSWER = ShapeDefinition(
    "question_answer",
    field("questionId", IsString(), Length(min=1)),
    field("answer"),
    description="Answer to one survey question: text, a rating, or selected options",
)

SUBMIT_SURVEY_RESPONSE = ShapeDefinition(
    "submit_survey_response",
    field("answers", IsArray(), ArrayMinSize(1), Each(Nested(QUESTION_ANSWER))),
    description="Submit the answers of a candidate experience survey",
)

SHAPES = [SURVEY_QUESTION, CREATE_SURVEY, QUESTION_ANSWER, SUBMIT_SURVEY_RESPONSE]
