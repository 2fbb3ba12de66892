"""
Employee API: Payload Validation Tests
=========================================

What:  Tests for EmployeePayload and the validate_employee_payload dependency.
How:   The dependency is exercised through the POST/PUT routes so that the
       placement guarantee (no Store interaction on rejection) is covered too.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from employee_api.schemas.employee import EmployeePayload

EMPLOYEES = "/api/employees/"


class TestEmployeePayload:

    def test_strips_whitespace(self):
        payload = EmployeePayload(name="  Ana ", email=" a@x.com", position="Eng ")

        assert payload.model_dump() == {"name": "Ana", "email": "a@x.com", "position": "Eng"}

    def test_ignores_client_supplied_id(self):
        payload = EmployeePayload.model_validate(
            {"id": 99, "name": "Ana", "email": "a@x.com", "position": "Eng"}
        )

        assert not hasattr(payload, "id")

    @pytest.mark.parametrize("email", ["not-an-email", "a@b", "a b@x.com", "@x.com"])
    def test_rejects_malformed_email(self, email):
        with pytest.raises(PydanticValidationError):
            EmployeePayload(name="Ana", email=email, position="Eng")

    def test_rejects_overlong_field(self):
        with pytest.raises(PydanticValidationError):
            EmployeePayload(name="x" * 256, email="a@x.com", position="Eng")


class TestValidationDependency:

    @pytest.mark.asyncio
    async def test_empty_name_rejected_with_field_reason(self, test_client, employee_data):
        employee_data["name"] = ""

        response = await test_client.post(EMPLOYEES, json=employee_data)

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["details"]["fields"] == {"name": "must not be empty"}

    @pytest.mark.asyncio
    async def test_every_failing_field_reported(self, test_client):
        response = await test_client.post(EMPLOYEES, json={"email": "nope", "position": 5})

        fields = response.json()["details"]["fields"]
        assert fields == {
            "name": "is required",
            "email": "must be a valid email address",
            "position": "must be a string",
        }

    @pytest.mark.asyncio
    async def test_non_object_body_rejected(self, test_client):
        response = await test_client.post(EMPLOYEES, json=["Ana", "a@x.com", "Eng"])

        assert response.status_code == 400
        assert response.json()["message"] == "Request body must be a JSON object"

    @pytest.mark.asyncio
    async def test_invalid_json_rejected(self, test_client):
        response = await test_client.post(
            EMPLOYEES,
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_update_is_validated(self, test_client, employee_data):
        created = (await test_client.post(EMPLOYEES, json=employee_data)).json()

        response = await test_client.put(
            f"{EMPLOYEES}{created['id']}",
            json={"name": "Ana", "email": "a@x.com", "position": ""},
        )

        assert response.status_code == 400
        stored = (await test_client.get(f"{EMPLOYEES}{created['id']}")).json()
        assert stored["position"] == "Eng"
