# File: src/labportal/schemas/execution.py

from .base import CamelModel


class ExecuteRequest(CamelModel):
    # Plain label such as "Python"; unknown labels are rejected by the gateway
    language: str
    code: str
    stdin: str = ""


class ExecuteResponse(CamelModel):
    output: str


class LanguageRead(CamelModel):
    language: str
    file_name: str
    template: str
