"""Application record endpoints."""

from typing import Any, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request, Response, status

from application.dto import Caller
from application.use_cases import (
    AmendApplicationUseCase,
    DeleteApplicationUseCase,
    GetApplicationUseCase,
    ListApplicationsUseCase,
    SubmitApplicationUseCase,
)
from domain.enums import Capability
from presentation.schemas import ApplicationCreateRequest, ApplicationUpdateRequest
from presentation.api.v1.dependencies import (
    NotificationTask,
    get_amend_application_use_case,
    get_delete_application_use_case,
    get_get_application_use_case,
    get_list_applications_use_case,
    get_notification_task,
    get_submit_application_use_case,
    require,
)
from infrastructure.config import get_logger

router = APIRouter(prefix="/applications", tags=["applications"])
logger = get_logger(__name__)


def _location(request: Request, application_id: int) -> str:
    return str(request.url_for("get_application", application_id=application_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def submit_application(
    payload: ApplicationCreateRequest,
    request: Request,
    background_tasks: BackgroundTasks,
    caller: Caller = Depends(require(Capability.WRITE)),
    use_case: SubmitApplicationUseCase = Depends(get_submit_application_use_case),
    notify: NotificationTask = Depends(get_notification_task),
) -> Response:
    """Create an application; notifications go out after the response."""
    body = payload.to_document()
    application = await use_case.execute(body, caller.caller_id, owner_id=caller.owner_id)
    background_tasks.add_task(notify, application, body, True)
    
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": _location(request, application.id)},
    )


@router.get("")
async def list_applications(
    application_type: Optional[str] = Query(None, alias="applicationType"),
    teacher_name: Optional[str] = Query(None, alias="teacherName"),
    applicant_grade: Optional[str] = Query(None, alias="applicantGrade"),
    begin: int = Query(1),
    end: Optional[int] = Query(None),
    applicant_id: Optional[int] = Query(None, alias="applicantId"),
    applicant_name: Optional[str] = Query(None, alias="applicantName"),
    year: Optional[int] = Query(None),
    caller: Caller = Depends(require(Capability.READ)),
    use_case: ListApplicationsUseCase = Depends(get_list_applications_use_case),
) -> list[dict[str, Any]]:
    """List applications matching the filters; self-access callers only see their own."""
    filters = {
        key: value
        for key, value in (
            ("applicantId", applicant_id),
            ("applicantName", applicant_name),
            ("year", year),
        )
        if value is not None
    }
    return await use_case.execute(
        filters=filters,
        application_type=application_type,
        teacher_name=teacher_name,
        applicant_grade=applicant_grade,
        begin=begin,
        end=end,
        owner_id=caller.owner_id,
    )


@router.get("/{application_id}", name="get_application")
async def get_application(
    application_id: int,
    application_type: Optional[str] = Query(None, alias="applicationType"),
    caller: Caller = Depends(require(Capability.READ)),
    use_case: GetApplicationUseCase = Depends(get_get_application_use_case),
) -> dict[str, Any]:
    """Read one application, optionally projected to a single category."""
    return await use_case.execute(application_id, application_type, owner_id=caller.owner_id)


@router.put("/{application_id}", status_code=status.HTTP_204_NO_CONTENT)
async def amend_application(
    application_id: int,
    payload: ApplicationUpdateRequest,
    request: Request,
    background_tasks: BackgroundTasks,
    caller: Caller = Depends(require(Capability.WRITE)),
    use_case: AmendApplicationUseCase = Depends(get_amend_application_use_case),
    notify: NotificationTask = Depends(get_notification_task),
) -> Response:
    """Merge a partial document into an application."""
    patch = payload.to_document()
    result = await use_case.execute(application_id, patch, caller.caller_id, owner_id=caller.owner_id)
    
    if result.created:
        return Response(
            status_code=status.HTTP_201_CREATED,
            headers={"Location": _location(request, result.application.id)},
        )
    
    background_tasks.add_task(notify, result.application, patch, False)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{application_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_application(
    application_id: int,
    _: Caller = Depends(require(Capability.WRITE, allow_self=False)),
    use_case: DeleteApplicationUseCase = Depends(get_delete_application_use_case),
) -> Response:
    """Hard delete an application."""
    await use_case.execute(application_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
