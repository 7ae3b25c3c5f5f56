"""Render the handler source, manifest and compiler config of a function project."""

import importlib.resources
import json

import jinja2

from fnscaffold.create_cmd.function_spec import FunctionKind, FunctionSpec

HANDLER_TEMPLATES = {
    FunctionKind.HTTP: "index_http.ts.j2",
    FunctionKind.EVENT_DRIVEN: "index_event_driven.ts.j2",
}

DEPENDENCIES = {
    "@google-cloud/functions-framework": "^3.4.0",
    "typescript": "^5.4.5",
    "@google-cloud/firestore": "^7.7.0",
}

DEV_DEPENDENCIES = {
    "@types/express": "^4.17.21",
}

COMPILER_OPTIONS = {
    "target": "ES2018",
    "module": "CommonJS",
    "allowJs": True,
    "esModuleInterop": True,
    "forceConsistentCasingInFileNames": True,
    "strict": True,
    "skipLibCheck": True,
}

SOURCE_INCLUDE = ["**/*.ts"]


def _load_template(template_name: str) -> jinja2.Template:
    templates = importlib.resources.files(f"{__package__}.templates")
    source = templates.joinpath(template_name).read_text(encoding="utf-8")
    return jinja2.Template(
        source,
        keep_trailing_newline=True,
        undefined=jinja2.StrictUndefined,
    )


def render_handler(spec: FunctionSpec) -> str:
    """Render index.ts for the spec's kind, registering the handler under spec.name.

    Raises:
        ValueError: If the kind has no handler template
    """
    template_name = HANDLER_TEMPLATES.get(spec.kind)
    if template_name is None:
        raise ValueError(f"No handler template for function kind: {spec.kind!r}")
    return _load_template(template_name).render(function_name=spec.name)


def build_manifest(function_name: str) -> dict:
    """Build the package.json document for *function_name*."""
    return {
        "name": function_name,
        "version": "1.0.0",
        "main": "index.js",
        "scripts": {
            "build": "tsc",
            "test": 'echo "Error: no test specified" && exit 1',
            "start": f"npm run build && functions-framework --target={function_name} --source=.",
        },
        "keywords": [],
        "author": "",
        "license": "ISC",
        "description": "",
        "dependencies": dict(DEPENDENCIES),
        "devDependencies": dict(DEV_DEPENDENCIES),
    }


def build_compiler_config() -> dict:
    """Build the tsconfig.json document shared by every function kind."""
    return {
        "compilerOptions": dict(COMPILER_OPTIONS),
        "include": list(SOURCE_INCLUDE),
    }


def to_json(document: dict) -> str:
    """Serialize a manifest or compiler config with two-space indentation."""
    return json.dumps(document, indent=2)
