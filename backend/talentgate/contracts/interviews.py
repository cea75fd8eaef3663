"""Interview contracts — interview plans, interview scheduling and self-scheduling links."""

from enum import Enum

from talentgate.validators import (
    Each,
    IsArray,
    IsDateString,
    IsEnum,
    IsNumber,
    IsString,
    IsUUID,
    Length,
    Max,
    Min,
    Nested,
    ShapeDefinition,
    field,
    optional,
)


class LocationType(str, Enum):
    PHONE = "phone"
    VIDEO = "video"
    ONSITE = "onsite"


class ParticipantRole(str, Enum):
    INTERVIEWER = "interviewer"
    COORDINATOR = "coordinator"
    OBSERVER = "observer"


CREATE_INTERVIEW_PLAN = ShapeDefinition(
    "create_interview_plan",
    field("name", IsString(), Length(1, 255)),
    optional("jobId", IsUUID()),
    optional("description", IsString()),
    description="Create an interview plan, optionally tied to a job",
)

UPDATE_INTERVIEW_PLAN = CREATE_INTERVIEW_PLAN.derive(
    "update_interview_plan",
    partial=True,
    description="Update any subset of an interview plan",
)

INTERVIEW_PARTICIPANT = ShapeDefinition(
    "interview_participant",
    field("userId", IsUUID()),
    field("role", IsEnum(ParticipantRole)),
    description="A user taking part in an interview",
)

CREATE_INTERVIEW = ShapeDefinition(
    "create_interview",
    field("applicationId", IsUUID()),
    optional("interviewStageId", IsUUID()),
    field("scheduledAt", IsDateString()),
    field("durationMinutes", IsNumber(), Min(1)),
    optional("locationType", IsEnum(LocationType)),
    optional("locationDetails", IsString()),
    optional("meetingLink", IsString()),
    optional("roomId", IsUUID()),
    field("participants", IsArray(), Each(Nested(INTERVIEW_PARTICIPANT))),
    description="Schedule an interview for an application",
)

CREATE_SCHEDULING_LINK = ShapeDefinition(
    "create_scheduling_link",
    field("applicationId", IsUUID()),
    optional("interviewStageId", IsUUID()),
    field("interviewerIds", IsArray(), Each(IsUUID())),
    field("durationMinutes", IsNumber(), Min(15), Max(480)),
    field("locationType", IsEnum(LocationType)),
    optional("meetingLink", IsString()),
    field("startDate", IsDateString()),
    field("endDate", IsDateString()),
    optional("bufferMinutes", IsNumber(), Min(0), Max(60)),
    optional("expiresAt", IsDateString()),
    description="Let a candidate pick an interview slot inside a date window",
)

SHAPES = [
    CREATE_INTERVIEW_PLAN,
    UPDATE_INTERVIEW_PLAN,
    INTERVIEW_PARTICIPANT,
    CREATE_INTERVIEW,
    CREATE_SCHEDULING_LINK,
]
