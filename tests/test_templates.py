"""Tests for the pure text renderers in ``mvc_generator.templates``."""

import re

import pytest

from mvc_generator.templates import (ROUTES_ANCHOR, render_base_entry_file, render_controller, render_model,
                                     render_route, render_route_import, render_route_registration, )


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------
@pytest.fixture
def controller() -> str:
    return render_controller("user", "User", "users")


def test_controller_defines_five_handlers(controller: str) -> None:
    handlers = re.findall(r"^exports\.(\w+) = async \(req, res\) => \{$", controller, re.MULTILINE)
    assert handlers == ["getAllUsers", "getUser", "createUser", "updateUser", "deleteUser"]


def test_controller_documents_routes(controller: str) -> None:
    for route in ["GET /api/v1/users", "GET /api/v1/users/:id", "POST /api/v1/users", "PATCH /api/v1/users/:id",
                  "DELETE /api/v1/users/:id", ]:
        assert f"@route {route}\n" in controller, f"missing route comment for {route}"


def test_controller_envelopes(controller: str) -> None:
    assert controller.count("success: true,") == 5
    assert controller.count("success: false,") == 5
    assert controller.count("message: 'Server Error',") == 5
    assert controller.count("error: error.message") == 5
    assert controller.count("TODO") == 5
    assert "res.status(201)" in controller
    assert "message: `Get user with id: ${id}`," in controller
    assert "data: { id, ...data }" in controller


def test_controller_requires_model(controller: str) -> None:
    assert controller.startswith("// User Controller\nconst UserModel = require('../models/userModel');\n")


def test_controller_braces_balanced(controller: str) -> None:
    assert controller.count("{") == controller.count("}")
    assert controller.count("(") == controller.count(")")


# ---------------------------------------------------------------------------
# Route and model
# ---------------------------------------------------------------------------
def test_route_wires_handlers() -> None:
    route = render_route("user", "User")
    assert "} = require('../controllers/userController');" in route
    expected = ["router.get('/', getAllUsers);", "router.get('/:id', getUser);", "router.post('/', createUser);",
                "router.patch('/:id', updateUser);", "router.delete('/:id', deleteUser);", ]
    lines = route.splitlines()
    assert [line for line in lines if line.startswith("router.")] == expected
    assert route.endswith("module.exports = router;\n")


def test_model_declares_fields() -> None:
    model = render_model("user", "User")
    assert "const UserModel = {" in model
    for field in ["id", "name"]:
        assert f"  {field}: {{\n    type: 'string',\n    required: true,\n  }}" in model
    for field in ["createdAt", "updatedAt"]:
        assert f"  {field}: {{\n    type: 'date',\n    default: Date.now,\n  }}" in model
    assert model.endswith("module.exports = UserModel;\n")


def test_renderers_are_deterministic() -> None:
    assert render_controller("bus", "Bus", "bus") == render_controller("bus", "Bus", "bus")
    assert render_route("bus", "Bus") == render_route("bus", "Bus")
    assert render_model("bus", "Bus") == render_model("bus", "Bus")
    assert render_base_entry_file() == render_base_entry_file()


# ---------------------------------------------------------------------------
# Entry file
# ---------------------------------------------------------------------------
def test_base_entry_file_skeleton() -> None:
    text = render_base_entry_file()
    lines = text.split("\n")
    anchor = next(i for i, line in enumerate(lines) if ROUTES_ANCHOR in line)
    assert lines[anchor + 1] == "" and lines[anchor + 2] == "", "two blank lines follow the anchor"
    assert "message: 'Server is running!'," in text
    assert "timestamp: new Date().toISOString()" in text
    assert "const PORT = process.env.PORT || 3000;" in text
    assert text.count("console.log(") == 2
    assert "app.use(express.json());" in text


def test_route_statements() -> None:
    assert render_route_import("user") == "const userRoute = require('./routes/userRoute');"
    assert render_route_registration("user", "users") == "app.use('/api/v1/users', userRoute);"
