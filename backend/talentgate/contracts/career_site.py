"""Career site contracts — public job-application submission."""

from talentgate.validators import (
    Each,
    IsArray,
    IsEmail,
    IsObject,
    IsString,
    IsUrl,
    IsUUID,
    Length,
    MaxLength,
    Nested,
    ShapeDefinition,
    field,
    optional,
)

# Answers may be free text, a number, or a list of picked options, so only presence is checked
SCREENING_ANSWER = ShapeDefinition(
    "screening_answer",
    field("questionId", IsString(), Length(min=1)),
    field("answer"),
    description="Answer to one screening question of an application form",
)

SUBMIT_APPLICATION = ShapeDefinition(
    "submit_application",
    field("jobId", IsUUID()),
    field("firstName", IsString(), Length(1, 100)),
    field("lastName", IsString(), Length(1, 100)),
    field("email", IsEmail()),
    optional("phone", IsString(), MaxLength(50)),
    optional("resumeUrl", IsUrl()),
    optional("coverLetter", IsString(), MaxLength(10000)),
    optional("customFields", IsObject()),
    optional("screeningAnswers", IsArray(), Each(Nested(SCREENING_ANSWER))),
    optional("eeoData", IsObject()),
    description="Apply to an open job from the public career site",
)

SHAPES = [SCREENING_ANSWER, SUBMIT_APPLICATION]
