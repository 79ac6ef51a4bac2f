import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from restcore.main import create_app
from restcore.services.controller import ResourceController
from restcore.services.errors import ConfigurationError
from restcore.settings import Settings


def test_project_crud_flow(client: TestClient) -> None:
    created = client.post("/projects", json={"project": {"name": " Alpha  Beta ", "owner": "ana", "id": 77}})
    assert created.status_code == 201
    project = created.json()["project"]
    assert project["name"] == "Alpha Beta"
    assert project["id"] != 77

    listed = client.get("/projects")
    assert listed.status_code == 200
    assert [item["id"] for item in listed.json()["projects"]] == [project["id"]]

    fetched = client.get(f"/projects/{project['id']}")
    assert fetched.json()["project"]["owner"] == "ana"

    updated = client.put(f"/projects/{project['id']}", json={"project": {"owner": "li"}})
    assert updated.status_code == 200
    assert updated.json()["project"]["owner"] == "li"
    assert updated.json()["project"]["name"] == "Alpha Beta"

    patched = client.patch(f"/projects/{project['id']}", json={"project": {"description": "notes"}})
    assert patched.json()["project"]["description"] == "notes"

    deleted = client.delete(f"/projects/{project['id']}")
    assert deleted.status_code == 204
    assert deleted.content == b""

    assert client.get(f"/projects/{project['id']}").status_code == 404


def test_missing_resource_envelope(client: TestClient) -> None:
    response = client.get("/tags/5")

    assert response.status_code == 404
    assert response.json() == {
        "httpStatusCode": 404,
        "statusText": "Not Found",
        "title": "Resource not available.",
        "devMessage": "The resource you requested is not available.",
        "code": "43758093745021",
        "more": None,
        "validationList": [],
    }


@pytest.mark.parametrize("content", [b"", b"{not json", b'{"tag": {}}'])
def test_post_without_data_is_400(client: TestClient, content: bytes) -> None:
    response = client.post("/tags", content=content, headers={"content-type": "application/json"})

    assert response.status_code == 400
    assert response.json()["code"] == "568136818916816555"
    assert response.json()["devMessage"] == "Invalid data posted to the server"


def test_put_without_data_is_400(client: TestClient) -> None:
    tag = client.post("/tags", json={"tag": {"label": "red"}}).json()["tag"]

    response = client.put(f"/tags/{tag['id']}")

    assert response.status_code == 400
    assert response.json()["code"] == "568136818916816"


def test_validation_failure_rolls_back(client: TestClient) -> None:
    response = client.post("/projects", json={"project": {"name": "   "}})

    assert response.status_code == 400
    body = response.json()
    assert body["title"] == "Project is invalid."
    assert body["validationList"] == [{"field": "name", "message": "Name is required.", "code": "required"}]
    assert client.get("/projects").json() == {"projects": []}


def test_unknown_field_is_reported_per_field(client: TestClient) -> None:
    response = client.post("/tags", json={"tag": {"label": "red", "shade": "dark"}})

    assert response.status_code == 400
    assert [item["field"] for item in response.json()["validationList"]] == ["shade"]


def test_duplicate_label_is_rejected_and_nothing_changes(client: TestClient) -> None:
    assert client.post("/tags", json={"tag": {"label": "red"}}).status_code == 201

    response = client.post("/tags", json={"tag": {"label": "red", "color": "#f00"}})

    assert response.status_code == 400
    assert response.json()["code"] == "80358902347103"
    assert response.json()["devMessage"]
    assert [tag["label"] for tag in client.get("/tags").json()["tags"]] == ["red"]


def test_update_missing_record_is_404(client: TestClient) -> None:
    response = client.put("/tags/404", json={"tag": {"label": "blue"}})

    assert response.status_code == 404


def test_delete_missing_record_is_404(client: TestClient) -> None:
    assert client.delete("/tags/404").status_code == 404


def test_unresolvable_model_is_not_translated(settings: Settings, session_factory: sessionmaker[Session]) -> None:
    class WidgetController(ResourceController):
        pass

    app = create_app(settings, controllers=[WidgetController], session_factory=session_factory)

    with pytest.raises(ConfigurationError):
        TestClient(app).get("/widgets")
