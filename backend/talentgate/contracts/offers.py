"""Offer contracts — offers, approvals, sending and offer templates.

Template defaults (currency USD, 7 expiry days, active) are applied by the
offer service when it stores a template; validation never injects them.
"""

from enum import Enum

from talentgate.validators import (
    Each,
    IsArray,
    IsBoolean,
    IsDateString,
    IsEmail,
    IsEnum,
    IsNumber,
    IsObject,
    IsString,
    IsUUID,
    MaxLength,
    Min,
    Nested,
    ShapeDefinition,
    field,
    optional,
)

MAX_COMMENT_LENGTH = 1000
MAX_OFFER_MESSAGE_LENGTH = 5000

# ISO 4217 codes are three letters
CURRENCY_CODE_LENGTH = 3


class EquityType(str, Enum):
    STOCK_OPTIONS = "stock_options"
    RSU = "rsu"
    EQUITY_GRANT = "equity_grant"


APPROVE_OFFER = ShapeDefinition(
    "approve_offer",
    optional("comments", IsString(), MaxLength(MAX_COMMENT_LENGTH)),
    description="Approve an offer at the caller's step of the approval workflow",
)

REJECT_OFFER = APPROVE_OFFER.derive(
    "reject_offer",
    description="Reject an offer at the caller's step of the approval workflow",
)

SEND_OFFER = ShapeDefinition(
    "send_offer",
    optional("message", IsString(), MaxLength(MAX_OFFER_MESSAGE_LENGTH)),
    optional("ccEmails", IsArray(), Each(IsEmail())),
    description="Send an approved offer to the candidate",
)

CREATE_OFFER_TEMPLATE = ShapeDefinition(
    "create_offer_template",
    field("name", IsString(), MaxLength(255)),
    optional("description", IsString()),
    field("content", IsString()),
    optional("variables", IsArray(), Each(IsString())),
    optional("defaultCurrency", IsString(), MaxLength(CURRENCY_CODE_LENGTH)),
    optional("defaultBenefits", IsString()),
    optional("expiryDays", IsNumber(), Min(1)),
    optional("active", IsBoolean()),
    description="Create a reusable offer letter template",
)

UPDATE_OFFER_TEMPLATE = CREATE_OFFER_TEMPLATE.derive(
    "update_offer_template",
    partial=True,
    description="Update any subset of an offer template",
)

EQUITY_DETAILS = ShapeDefinition(
    "equity_details",
    field("type", IsEnum(EquityType)),
    field("amount", IsNumber(), Min(0)),
    optional("vestingSchedule", IsString()),
)

OFFER_APPROVER = ShapeDefinition(
    "offer_approver",
    field("userId", IsUUID()),
    field("order", IsNumber(), Min(1)),
)

CREATE_OFFER = ShapeDefinition(
    "create_offer",
    field("applicationId", IsUUID()),
    optional("templateId", IsUUID()),
    field("jobTitle", IsString(), MaxLength(255)),
    field("salary", IsNumber(), Min(0)),
    optional("currency", IsString(), MaxLength(CURRENCY_CODE_LENGTH)),
    optional("bonus", IsNumber(), Min(0)),
    optional("equity", Nested(EQUITY_DETAILS)),
    optional("startDate", IsDateString()),
    optional("benefits", IsString()),
    optional("notes", IsString()),
    optional("approvalWorkflow", IsArray(), Each(Nested(OFFER_APPROVER))),
    optional("expiryDays", IsNumber(), Min(1)),
    optional("customFields", IsObject()),
    description="Draft an offer for an application",
)

SHAPES = [
    APPROVE_OFFER,
    REJECT_OFFER,
    SEND_OFFER,
    CREATE_OFFER_TEMPLATE,
    UPDATE_OFFER_TEMPLATE,
    EQUITY_DETAILS,
    OFFER_APPROVER,
    CREATE_OFFER,
]
