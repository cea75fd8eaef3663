"""Application contracts — create, update, move, reject and bulk pipeline operations."""

from enum import Enum

from talentgate.validators import (
    ArrayMaxSize,
    ArrayMinSize,
    Each,
    IsArray,
    IsBoolean,
    IsEnum,
    IsInt,
    IsObject,
    IsString,
    IsUUID,
    MaxLength,
    Range,
    ShapeDefinition,
    field,
    optional,
)

# Upper bound on one bulk request, keeps a single pipeline update bounded
MAX_BULK_APPLICATIONS = 100


class ApplicationStatus(str, Enum):
    ACTIVE = "active"
    REJECTED = "rejected"
    WITHDRAWN = "withdrawn"
    HIRED = "hired"


CREATE_APPLICATION = ShapeDefinition(
    "create_application",
    field("candidateId", IsUUID()),
    field("jobId", IsUUID()),
    optional("stageId", IsUUID()),
    optional("source", IsObject()),
    optional("rating", IsInt(), Range(1, 5)),
    optional("customFields", IsObject()),
    description="Create an application of a candidate to a job, at a given or the first stage",
)

UPDATE_APPLICATION = CREATE_APPLICATION.derive(
    "update_application",
    optional("status", IsEnum(ApplicationStatus)),
    partial=True,
    description="Update stage, status, rating or custom fields of an application",
)

MOVE_APPLICATION = ShapeDefinition(
    "move_application",
    field("stageId", IsUUID()),
    optional("notes", IsString(), MaxLength(1000)),
    description="Move an application to another pipeline stage",
)

REJECT_APPLICATION = ShapeDefinition(
    "reject_application",
    optional("rejectionReasonId", IsUUID()),
    optional("notes", IsString(), MaxLength(2000)),
    optional("sendEmail", IsBoolean()),
    description="Reject an application with an optional reason",
)

_APPLICATION_IDS = field(
    "applicationIds",
    IsArray(),
    ArrayMinSize(1),
    ArrayMaxSize(MAX_BULK_APPLICATIONS),
    Each(IsUUID()),
)

BULK_MOVE_APPLICATIONS = ShapeDefinition(
    "bulk_move_applications",
    _APPLICATION_IDS,
    field("stageId", IsUUID()),
    description="Move several applications to one pipeline stage",
)

BULK_REJECT_APPLICATIONS = REJECT_APPLICATION.derive(
    "bulk_reject_applications",
    _APPLICATION_IDS,
    optional("notes", IsString()),
    description="Reject several applications with one reason",
)

SHAPES = [
    CREATE_APPLICATION,
    UPDATE_APPLICATION,
    MOVE_APPLICATION,
    REJECT_APPLICATION,
    BULK_MOVE_APPLICATIONS,
    BULK_REJECT_APPLICATIONS,
]
