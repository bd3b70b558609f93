# storefront/api/routers/reports.py
from fastapi import APIRouter, Query

from storefront.data.seed import DEMO_DESCRIPTION, DEMO_REVIEW
from storefront.domain.schemas import ReportsOut
from storefront.services.report_service import ReportService

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("", response_model=ReportsOut)
def get_reports(
    description: str = Query(DEMO_DESCRIPTION),
    review: str = Query(DEMO_REVIEW),
):
    return ReportService().build(description=description, review=review)
