"""Resume parser contracts — upload and parse-and-create options.

The resume file itself travels as a multipart upload; these shapes cover the
accompanying form fields.
"""

from talentgate.validators import IsBoolean, IsObject, IsString, IsUUID, MaxLength, ShapeDefinition, optional

UPLOAD_RESUME = ShapeDefinition(
    "upload_resume",
    optional("candidateId", IsUUID()),
    optional("fileName", IsString()),
    description="Attach an uploaded resume to an existing candidate, or parse it standalone",
)

PARSE_AND_CREATE_CANDIDATE = ShapeDefinition(
    "parse_and_create_candidate",
    optional("autoCreate", IsBoolean()),
    optional("sourceType", IsString(), MaxLength(50)),
    optional("sourceDetails", IsObject()),
    optional("gdprConsent", IsBoolean()),
    optional("customFields", IsObject()),
    description="Parse an uploaded resume and create a candidate from it",
)

SHAPES = [UPLOAD_RESUME, PARSE_AND_CREATE_CANDIDATE]
