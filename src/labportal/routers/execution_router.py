# File: src/labportal/routers/execution_router.py

from typing import List

from fastapi import APIRouter, Depends

from ..schemas.execution import ExecuteRequest, ExecuteResponse, LanguageRead
from ..utils.execution import ExecutionGateway, get_execution_gateway

router = APIRouter(tags=["Code Execution"])


@router.post("/execute", response_model=ExecuteResponse, summary="Run code without saving it")
def execute_code(
    payload: ExecuteRequest,
    gateway: ExecutionGateway = Depends(get_execution_gateway),
):
    return gateway.execute(payload.language, payload.code, payload.stdin)


@router.get("/languages", response_model=List[LanguageRead])
def list_languages(gateway: ExecutionGateway = Depends(get_execution_gateway)):
    return gateway.languages()
