from pydantic import BaseModel, ConfigDict, Field, field_validator


class PreferenceUpdateRequest(BaseModel):
	currency: str = Field(..., min_length=3, max_length=5)

	@field_validator('currency')
	@classmethod
	def uppercase_currency(cls, v: str):
		return v.upper()

	model_config = ConfigDict(json_schema_extra={'example': {'currency': 'EUR'}})
