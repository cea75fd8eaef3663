"""Communication contracts — internal notes with mentions and outbound email."""

from talentgate.validators import (
    Each,
    IsArray,
    IsEmail,
    IsObject,
    IsString,
    IsUUID,
    Length,
    ShapeDefinition,
    field,
    optional,
)

CREATE_NOTE = ShapeDefinition(
    "create_note",
    field("body", IsString(), Length(1, 10000)),
    optional("candidateId", IsUUID()),
    optional("applicationId", IsUUID()),
    optional("mentions", IsArray(), Each(IsUUID())),
    description="Create an internal note on a candidate or application, mentioning users by id",
)

SEND_EMAIL = ShapeDefinition(
    "send_email",
    field("toEmails", IsArray(), Each(IsEmail())),
    optional("ccEmails", IsArray(), Each(IsEmail())),
    optional("bccEmails", IsArray(), Each(IsEmail())),
    field("subject", IsString()),
    field("body", IsString()),
    optional("candidateId", IsUUID()),
    optional("applicationId", IsUUID()),
    optional("templateId", IsUUID()),
    optional("templateVariables", IsObject()),
    optional("attachments", IsArray(), Each(IsString())),
    description="Send an email to candidates or colleagues, optionally from a template",
)

SHAPES = [CREATE_NOTE, SEND_EMAIL]
