"""Text templates for the generated Express MVC skeleton.

Every function here is pure: it takes the resource name (and its derived
forms) and returns the literal source text of one generated file.  There
is no filesystem or environment access, so identical inputs always give
byte-identical output.

The entry-file statements produced by :func:`render_route_import` and
:func:`render_route_registration` are the exact strings the entry-file
patcher searches for and inserts, see :mod:`mvc_generator.entry_file`.
"""

from __future__ import annotations

__all__ = ["API_PREFIX", "ROUTES_ANCHOR", "render_controller", "render_route", "render_model",
           "render_base_entry_file", "render_route_import", "render_route_registration", ]

API_PREFIX = "/api/v1"

# Literal marker searched for in the entry file.
ROUTES_ANCHOR = "// Add your routes below"

_SERVER_ERROR = """  } catch (error) {
    res.status(500).json({
      success: false,
      message: 'Server Error',
      error: error.message
    });
  }
};"""


def render_controller(name: str, capitalized: str, pluralized: str) -> str:
    """Return the controller module with five placeholder handlers.

    Each handler answers with a ``{success, message, data}`` envelope and
    falls back to the shared ``Server Error`` envelope when it throws.
    """
    return f"""// {capitalized} Controller
const {capitalized}Model = require('../models/{name}Model');

/**
 * Get all {pluralized}
 * @route GET {API_PREFIX}/{pluralized}
 */
exports.getAll{capitalized}s = async (req, res) => {{
  try {{
    // TODO: Implement get all {pluralized} logic
    res.status(200).json({{
      success: true,
      message: 'Get all {pluralized}',
      data: []
    }});
{_SERVER_ERROR}

/**
 * Get single {name}
 * @route GET {API_PREFIX}/{pluralized}/:id
 */
exports.get{capitalized} = async (req, res) => {{
  try {{
    const {{ id }} = req.params;
    // TODO: Implement get single {name} logic
    res.status(200).json({{
      success: true,
      message: `Get {name} with id: ${{id}}`,
      data: {{}}
    }});
{_SERVER_ERROR}

/**
 * Create new {name}
 * @route POST {API_PREFIX}/{pluralized}
 */
exports.create{capitalized} = async (req, res) => {{
  try {{
    const data = req.body;
    // TODO: Implement create {name} logic
    res.status(201).json({{
      success: true,
      message: '{capitalized} created successfully',
      data: data
    }});
{_SERVER_ERROR}

/**
 * Update {name}
 * @route PATCH {API_PREFIX}/{pluralized}/:id
 */
exports.update{capitalized} = async (req, res) => {{
  try {{
    const {{ id }} = req.params;
    const data = req.body;
    // TODO: Implement update {name} logic
    res.status(200).json({{
      success: true,
      message: `{capitalized} updated successfully`,
      data: {{ id, ...data }}
    }});
{_SERVER_ERROR}

/**
 * Delete {name}
 * @route DELETE {API_PREFIX}/{pluralized}/:id
 */
exports.delete{capitalized} = async (req, res) => {{
  try {{
    const {{ id }} = req.params;
    // TODO: Implement delete {name} logic
    res.status(200).json({{
      success: true,
      message: `{capitalized} deleted successfully`,
      data: {{ id }}
    }});
{_SERVER_ERROR}
"""


def render_route(name: str, capitalized: str) -> str:
    """Return the sub-router wiring the five handlers.

    The router is mounted at ``/api/v1/<pluralized>`` by the entry file.
    """
    return f"""// {capitalized} Routes
const express = require('express');
const router = express.Router();

// Import controllers
const {{
  getAll{capitalized}s,
  get{capitalized},
  create{capitalized},
  update{capitalized},
  delete{capitalized},
}} = require('../controllers/{name}Controller');

// Routes
router.get('/', getAll{capitalized}s);
router.get('/:id', get{capitalized});
router.post('/', create{capitalized});
router.patch('/:id', update{capitalized});
router.delete('/:id', delete{capitalized});

module.exports = router;
"""


def render_model(name: str, capitalized: str) -> str:
    return f"""// {capitalized} Model

/**
 * {capitalized} Model Structure
 * Define your {name} schema/structure here
 */
const {capitalized}Model = {{
  // Example fields - modify according to your needs
  id: {{
    type: 'string',
    required: true,
  }},
  name: {{
    type: 'string',
    required: true,
  }},
  createdAt: {{
    type: 'date',
    default: Date.now,
  }},
  updatedAt: {{
    type: 'date',
    default: Date.now,
  }}
}};

// TODO: Implement your database logic here
// This could be MongoDB with Mongoose, MySQL with Sequelize, etc.

module.exports = {capitalized}Model;
"""


def render_base_entry_file() -> str:
    """Return the initial ``app.js`` skeleton.

    The two blank lines after the anchor comment are where route
    registrations accumulate.
    """
    return f"""const express = require('express');
const app = express();

// Middleware
app.use(express.json());
app.use(express.urlencoded({{ extended: true }}));


// check route
app.get('/', (req, res) => {{
  res.status(200).json({{
    success: true,
    message: 'Server is running!',
    timestamp: new Date().toISOString()
  }});
}});

// Routes will be added here automatically
{ROUTES_ANCHOR} 👇


// Server
const PORT = process.env.PORT || 3000;
app.listen(PORT, () => {{
  console.log(`🚀 Server running on port ${{PORT}}`);
  console.log(`📍 Health check: http://localhost:${{PORT}}/`);
}});

module.exports = app;
"""


def render_route_import(name: str) -> str:
    return f"const {name}Route = require('./routes/{name}Route');"


def render_route_registration(name: str, pluralized: str) -> str:
    return f"app.use('{API_PREFIX}/{pluralized}', {name}Route);"
