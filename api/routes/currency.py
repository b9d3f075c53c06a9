from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import (
	get_cost_service,
	get_currency_service,
	get_request_auditor,
	get_request_context,
)
from api.schemas import CostResponse, ErrorResponse, SupportedCurrenciesResponse
from application.services import (
	CostService,
	CurrencyService,
	RequestAuditor,
	RequestContext,
)
from domain.models.currency import ConversionRequest

router = APIRouter(tags=['currency'])


@router.get(
	'/cost',
	response_model=CostResponse,
	status_code=status.HTTP_200_OK,
	responses={400: {'model': ErrorResponse, 'description': 'Invalid parameters'}},
	summary='Convert an amount into US dollars',
)
async def get_cost(
	service: Annotated[CostService, Depends(get_cost_service)],
	auditor: Annotated[RequestAuditor, Depends(get_request_auditor)],
	context: Annotated[RequestContext, Depends(get_request_context)],
	valute: Annotated[str | None, Query(description='Currency code, e.g. EUR')] = None,
	nominal: Annotated[str | None, Query(description='Amount to convert')] = None,
) -> CostResponse:
	request = ConversionRequest(valute=valute, nominal=nominal)
	result = await auditor.run(lambda: service.get_cost(request), context)
	return CostResponse(**result)


@router.get(
	'/currencies',
	response_model=SupportedCurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='List currencies the rate source currently provides',
)
async def get_supported_currencies(
	service: Annotated[CurrencyService, Depends(get_currency_service)],
	auditor: Annotated[RequestAuditor, Depends(get_request_auditor)],
	context: Annotated[RequestContext, Depends(get_request_context)],
) -> SupportedCurrenciesResponse:
	currencies = await auditor.run(service.get_supported_currencies, context)
	return SupportedCurrenciesResponse(currencies=currencies)
