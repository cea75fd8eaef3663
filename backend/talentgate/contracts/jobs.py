"""Job contracts — requisition create and update."""

from enum import Enum

from talentgate.validators import (
    Each,
    IsArray,
    IsBoolean,
    IsEnum,
    IsNumber,
    IsObject,
    IsString,
    IsUUID,
    MaxLength,
    Min,
    ShapeDefinition,
    field,
    optional,
)


class JobStatus(str, Enum):
    DRAFT = "draft"
    OPEN = "open"
    ON_HOLD = "on_hold"
    CLOSED = "closed"
    CANCELLED = "cancelled"


class EmploymentType(str, Enum):
    FULL_TIME = "full_time"
    PART_TIME = "part_time"
    CONTRACT = "contract"
    INTERNSHIP = "internship"


class SeniorityLevel(str, Enum):
    ENTRY = "entry"
    JUNIOR = "junior"
    MID = "mid"
    SENIOR = "senior"
    LEAD = "lead"
    PRINCIPAL = "principal"
    EXECUTIVE = "executive"


CREATE_JOB = ShapeDefinition(
    "create_job",
    field("title", IsString(), MaxLength(255)),
    optional("description", IsString()),
    optional("departmentId", IsUUID()),
    optional("locationIds", IsArray(), Each(IsUUID())),
    optional("ownerId", IsUUID()),
    optional("status", IsEnum(JobStatus)),
    field("employmentType", IsEnum(EmploymentType)),
    optional("seniorityLevel", IsEnum(SeniorityLevel)),
    optional("remoteOk", IsBoolean()),
    optional("salaryMin", IsNumber(), Min(0)),
    optional("salaryMax", IsNumber(), Min(0)),
    optional("salaryCurrency", IsString(), MaxLength(3)),
    optional("requisitionId", IsString(), MaxLength(100)),
    optional("confidential", IsBoolean()),
    optional("interviewPlanId", IsUUID()),
    optional("customFields", IsObject()),
    description="Open a job requisition",
)

UPDATE_JOB = CREATE_JOB.derive(
    "update_job",
    partial=True,
    description="Update any subset of a job requisition",
)

SHAPES = [CREATE_JOB, UPDATE_JOB]
