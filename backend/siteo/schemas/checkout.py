from pydantic import BaseModel, ConfigDict, EmailStr, Field


class CheckoutSessionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    lead_id: str | None = Field(default=None, alias='leadId')
    return_url: str = Field(alias='returnUrl')


class CheckoutSessionResponse(BaseModel):
    url: str


class CancelSubscriptionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    lead_id: str | None = Field(default=None, alias='leadId')


class ContactRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    phone: str | None = None
    message: str = Field(min_length=1, max_length=5000)
    agent_id: str = Field(alias='agentId')


class ContactResponse(BaseModel):
    success: bool = True
    id: str | None = None
