"""Tests for the FastAPI service mode."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from barrelgen.orchestrator import Orchestrator
from barrelgen.service import create_app
from tests._fixtures.project_builder import ProjectBuilder


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app(Orchestrator))


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_validate_endpoint_returns_issues_and_stats(
    client: TestClient, project_builder: ProjectBuilder
) -> None:
    project_builder.write(
        {
            "src/index.ts": "export * from './a';\n",
            "src/a.ts": "export interface A {}\n",
            "src/lib/b.ts": "export const b = 1;\n",
        }
    )

    response = client.post("/validate", json={"path": str(project_builder.path())})

    assert response.status_code == 200
    data = response.json()
    assert data["stats"] == {"total_exports": 3, "named_exports": 2, "index_files": 1, "re_exports": 1}
    assert data["issues"] == [
        {
            "kind": "missing_index",
            "message": "No index.ts file found for directory: lib",
            "file": "lib/b.ts",
            "symbol": "b",
        }
    ]
    assert data["report_path"].endswith("export-validation.md")


def test_generate_endpoint_previews_barrel(client: TestClient, project_builder: ProjectBuilder) -> None:
    project_builder.write(
        {
            "src/index.ts": "export * from './a';\nexport * from './missing';\n",
            "src/a.ts": "export interface A {}\n",
        }
    )

    response = client.post(
        "/generate", json={"barrel": "src/index.ts", "root": str(project_builder.path())}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["content"] == "export type {\n  A,\n} from './a';\n"
    assert data["modules"] == ["./a"]
    assert len(data["warnings"]) == 1
    assert project_builder.read("src/index.ts").startswith("export * from './a';")


def test_generate_endpoint_maps_missing_barrel_to_404(
    client: TestClient, project_builder: ProjectBuilder
) -> None:
    response = client.post(
        "/generate", json={"barrel": "src/index.ts", "root": str(project_builder.path())}
    )

    assert response.status_code == 404
    assert "Barrel file not found" in response.json()["detail"]
