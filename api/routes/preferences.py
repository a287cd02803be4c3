from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from api.dependencies import get_preference_service
from api.schemas import PreferenceResponse, PreferenceUpdateRequest
from application.services import PreferenceService

router = APIRouter(prefix='/api/users', tags=['preferences'])

UserIdPath = Annotated[str, Path(min_length=1, max_length=64)]


@router.get(
	'/{user_id}/currency',
	response_model=PreferenceResponse,
	status_code=status.HTTP_200_OK,
	summary='Get preferred display currency',
)
async def get_preferred_currency(
	user_id: UserIdPath,
	service: Annotated[PreferenceService, Depends(get_preference_service)],
) -> PreferenceResponse:
	currency = await service.get_preferred_currency(user_id)
	return PreferenceResponse(user_id=user_id, currency=currency)


@router.put(
	'/{user_id}/currency',
	response_model=PreferenceResponse,
	status_code=status.HTTP_200_OK,
	summary='Set preferred display currency',
)
async def set_preferred_currency(
	user_id: UserIdPath,
	request: PreferenceUpdateRequest,
	service: Annotated[PreferenceService, Depends(get_preference_service)],
) -> PreferenceResponse:
	preference = await service.set_preferred_currency(user_id, request.currency)
	return PreferenceResponse(
		user_id=preference.user_id,
		currency=preference.preferred_currency,
		updated_at=preference.updated_at,
	)
