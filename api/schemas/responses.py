from pydantic import BaseModel, ConfigDict, Field


class CostResponse(BaseModel):
	cost: float | None = Field(..., description='Requested amount expressed in US dollars')
	currency: str = Field(..., description='Source currency code, uppercased')

	model_config = ConfigDict(json_schema_extra={'example': {'cost': 12.0, 'currency': 'EUR'}})


class ErrorResponse(BaseModel):
	errors: list[str] = Field(..., description='Human-readable validation errors')
	status: int = Field(400, description='HTTP status code')

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'errors': ['Value "XYZ" not found in currency list'],
				'status': 400,
			}
		}
	)


class SupportedCurrenciesResponse(BaseModel):
	currencies: list[str] = Field(description='List of currency codes')

	model_config = ConfigDict(json_schema_extra={'examples': [{'currencies': ['EUR', 'RUB', 'USD']}]})
