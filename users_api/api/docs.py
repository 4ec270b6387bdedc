# api/docs.py
"""
Машиночитаемое описание API.

Сам OpenAPI-документ генерирует FastAPI по объявлениям маршрутов
(/openapi.json, Swagger UI на DOCS_URL). Здесь из него строится плоская
таблица маршрутов для внешних генераторов документации.
"""
from typing import List, Optional

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

HTTP_METHODS = ("get", "post", "put", "patch", "delete")


def local_servers(port: int) -> List[dict]:
    return [{"url": f"http://localhost:{port}", "description": "Local Server"}]


def _schema_name(schema: Optional[dict]) -> Optional[str]:
    """Имя схемы из $ref; массив описывается как Name[]."""
    if not schema:
        return None
    if "$ref" in schema:
        return schema["$ref"].rsplit("/", 1)[-1]
    if schema.get("type") == "array":
        item = _schema_name(schema.get("items"))
        return f"{item}[]" if item else None
    # Optional[Model] в pydantic v2 даёт anyOf [{$ref}, {type: null}]
    for variant in schema.get("anyOf", []):
        name = _schema_name(variant)
        if name:
            return name
    return None


def _json_schema(section: Optional[dict]) -> Optional[dict]:
    if not section:
        return None
    return section.get("content", {}).get("application/json", {}).get("schema")


def describe_routes(app: FastAPI) -> List[dict]:
    """
    Таблица маршрутов: метод, путь, описание, нужна ли авторизация,
    схемы тела запроса и успешного ответа, коды ответов.
    """
    table = []
    for path, operations in app.openapi().get("paths", {}).items():
        for method in HTTP_METHODS:
            operation = operations.get(method)
            if operation is None:
                continue
            responses = operation.get("responses", {})
            success = next((code for code in sorted(responses) if code.startswith("2")), None)
            table.append({
                "method": method.upper(),
                "path": path,
                "summary": operation.get("summary"),
                "auth": bool(operation.get("security")),
                "request_body": _schema_name(_json_schema(operation.get("requestBody"))),
                "response_body": _schema_name(_json_schema(responses.get(success))),
                "status_codes": sorted(int(code) for code in responses),
            })
    return table


def install_openapi(app: FastAPI):
    """
    Ошибки валидации сервис отдаёт как 400 {"message": ...},
    поэтому стандартные ответы 422 в документе заменяются на 400.
    """

    def custom_openapi():
        if app.openapi_schema:
            return app.openapi_schema
        schema = get_openapi(
            title=app.title,
            version=app.version,
            description=app.description,
            routes=app.routes,
            servers=app.servers,
        )
        for operations in schema.get("paths", {}).values():
            for operation in operations.values():
                responses = operation.get("responses", {})
                if responses.pop("422", None) is not None:
                    responses.setdefault("400", {
                        "description": "Invalid request.",
                        "content": {"application/json": {"schema": {"$ref": "#/components/schemas/Message"}}},
                    })
        components = schema.get("components", {}).get("schemas", {})
        components.pop("HTTPValidationError", None)
        components.pop("ValidationError", None)
        app.openapi_schema = schema
        return schema

    app.openapi = custom_openapi
