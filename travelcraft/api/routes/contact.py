from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from travelcraft.api.error import ClientError, ServerError
from travelcraft.app.services.unit_of_work import UnitOfWork
from travelcraft.app.use_cases.auth import MessageResponse
from travelcraft.app.use_cases.contact import ContactMessageCommand, SubmitContactMessageUseCase
from travelcraft.depends import get_unit_of_work

router = APIRouter(prefix="/contact", tags=["Contact"])


class ContactRequest(BaseModel):
    name: str = ""
    email: str = ""
    subject: str = ""
    message: str = Field("", description="Message body")


@router.post("", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def submit_contact_message(
    request: ContactRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Contact form

    Raises:
        - 400 Bad Request: Any field missing
    """
    result = await SubmitContactMessageUseCase(uow).execute(
        ContactMessageCommand(**request.model_dump())
    )
    if result.is_err():
        error = result.error
        if error.code == "MISSING_FIELDS":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)
    return result.value
