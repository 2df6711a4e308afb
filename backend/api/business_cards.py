from datetime import date
from typing import List, Optional
import logging

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from fastapi.responses import Response

from constants import FieldLimits
from dependencies import get_business_card_service
from dtos.internal.export_dto import ExportedFile
from dtos.request.business_card_request import AddBusinessCardRequest, RemoveBusinessCardRequest
from dtos.response.business_card_response import BusinessCardDto, ResultResponse
from services.interfaces import IBusinessCardService
from utils.error_handlers import handle_api_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/BusinessCard")


def _file_response(exported: ExportedFile) -> Response:
    return Response(
        content=exported.content,
        media_type=exported.content_type,
        headers={"Content-Disposition": f'attachment; filename="{exported.filename}"'},
    )


@router.post("/AddBusinessCard", response_model=ResultResponse)
@handle_api_errors("Add business card")
def add_business_card(
    name: str = Form(..., alias="Name", min_length=1, max_length=FieldLimits.NAME),
    email: str = Form(..., alias="Email", min_length=1, max_length=FieldLimits.EMAIL),
    date_of_birth: date = Form(..., alias="DateOfBirth"),
    phone: Optional[str] = Form(None, alias="Phone", max_length=FieldLimits.PHONE),
    gender: Optional[str] = Form(None, alias="Gender", max_length=FieldLimits.GENDER),
    address: Optional[str] = Form(None, alias="Address", max_length=FieldLimits.ADDRESS),
    photo_file: Optional[UploadFile] = File(None, alias="PhotoFile"),
    service: IBusinessCardService = Depends(get_business_card_service),
):
    """
    Create a business card from form fields and an optional photo upload.

    Returns 200 with a ResultResponse; a failed insert is reported through
    `succeeded=false`, not an error status.
    """
    request = AddBusinessCardRequest(
        name=name,
        email=email,
        phone=phone,
        gender=gender,
        date_of_birth=date_of_birth,
        address=address,
        photo_content=photo_file.file.read() if photo_file is not None else None,
        photo_filename=photo_file.filename if photo_file is not None else None,
    )
    return service.add_business_card(request)


@router.post("/ImportBusinessCards", response_model=List[BusinessCardDto])
@handle_api_errors("Import business cards")
def import_business_cards(
    file: UploadFile = File(...),
    file_type: str = Query(..., alias="fileType", description="csv or xml"),
    service: IBusinessCardService = Depends(get_business_card_service),
):
    """
    Import business cards from an uploaded CSV or XML file.

    Returns the parsed records. An empty file, unknown fileType, invalid
    record or failed insert yields 400 with the reason.
    """
    content = file.file.read()
    logger.info(f"Import requested: {file.filename} ({len(content)} bytes, type={file_type})")
    return service.import_business_cards(content, file_type)


@router.get("/GetAllBusinessCards", response_model=List[BusinessCardDto])
@handle_api_errors("Get business cards")
def get_all_business_cards(service: IBusinessCardService = Depends(get_business_card_service)):
    return service.get_all_business_cards()


@router.get("/FilterBusinessCards", response_model=List[BusinessCardDto])
@handle_api_errors("Filter business cards")
def filter_business_cards(
    name: Optional[str] = None,
    date_of_birth: Optional[date] = Query(None, alias="dob"),
    phone: Optional[str] = None,
    gender: Optional[str] = None,
    email: Optional[str] = None,
    service: IBusinessCardService = Depends(get_business_card_service),
):
    """
    Get business cards matching every supplied criterion

    Query parameters:
    - name: name contains
    - dob: exact date of birth (yyyy-MM-dd)
    - phone: phone contains
    - gender: gender equals, ignoring case
    - email: email contains, ignoring case
    """
    return service.filter_business_cards(
        name=name,
        date_of_birth=date_of_birth,
        phone=phone,
        gender=gender,
        email=email,
    )


@router.get("/SearchBusinessCards", response_model=List[BusinessCardDto])
@handle_api_errors("Search business cards")
def search_business_cards(
    term: str = Query(..., description="name, gender, email, phone or address"),
    search_string: str = Query("", alias="searchString"),
    service: IBusinessCardService = Depends(get_business_card_service),
):
    return service.search_business_cards(term, search_string)


@router.delete("/RemoveBusinessCard", response_model=ResultResponse)
@handle_api_errors("Remove business card")
def remove_business_card(
    request: RemoveBusinessCardRequest,
    service: IBusinessCardService = Depends(get_business_card_service),
):
    return service.remove_business_card(request)


@router.get("/export/csv")
@handle_api_errors("Export CSV")
def export_all_to_csv(service: IBusinessCardService = Depends(get_business_card_service)):
    return _file_response(service.export_all_to_csv())


@router.get("/export/csv/{card_id}")
@handle_api_errors("Export CSV")
def export_to_csv(card_id: int, service: IBusinessCardService = Depends(get_business_card_service)):
    """
    Download one business card as CSV.

    Raises:
        HTTPException: 404 if the card does not exist
    """
    return _file_response(service.export_to_csv(card_id))
