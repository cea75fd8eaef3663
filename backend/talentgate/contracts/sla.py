"""SLA contracts — hiring-stage time limits and their alerting."""

from enum import Enum

from talentgate.validators import (
    Each,
    IsArray,
    IsBoolean,
    IsEnum,
    IsInt,
    IsString,
    Min,
    ShapeDefinition,
    field,
    optional,
)


class SlaRuleType(str, Enum):
    TIME_TO_FIRST_REVIEW = "time_to_first_review"
    TIME_TO_SCHEDULE_INTERVIEW = "time_to_schedule_interview"
    TIME_TO_PROVIDE_FEEDBACK = "time_to_provide_feedback"
    TIME_TO_OFFER = "time_to_offer"
    TIME_TO_HIRE = "time_to_hire"


CREATE_SLA_RULE = ShapeDefinition(
    "create_sla_rule",
    field("name", IsString()),
    optional("description", IsString()),
    field("type", IsEnum(SlaRuleType)),
    field("thresholdHours", IsInt(), Min(1)),
    field("alertRecipients", IsArray(), Each(IsString())),
    optional("escalationRecipients", IsArray(), Each(IsString())),
    optional("escalationHours", IsInt(), Min(1)),
    optional("active", IsBoolean()),
    optional("jobIds", IsArray(), Each(IsString())),
    optional("departmentIds", IsArray(), Each(IsString())),
    description="Define a time limit on a hiring stage and who is alerted when it lapses",
)

SHAPES = [CREATE_SLA_RULE]
