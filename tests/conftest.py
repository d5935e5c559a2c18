"""Pytest configuration for the langjs test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 200 examples
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Fixtures:
- lang_tree: writes a language directory from a {relative_path: content} dict
- fixture_tree: the reference tree used by the end-to-end tests
"""

from __future__ import annotations

import json
import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, TypeAlias

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Property tests here touch the filesystem; tmp_path is reused per test
_SUPPRESSED = [HealthCheck.function_scoped_fixture, HealthCheck.too_slow]

settings.register_profile(
    "dev",
    max_examples=200,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    suppress_health_check=_SUPPRESSED,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
    suppress_health_check=_SUPPRESSED,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
    suppress_health_check=_SUPPRESSED,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested with ``-m fuzz``."""
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SOURCE TREE FIXTURES
# =============================================================================

TreeBuilder: TypeAlias = Callable[[Mapping[str, Any]], Path]


def write_tree(root: Path, files: Mapping[str, Any]) -> Path:
    """Write files under root; mappings are dumped as JSON, strings verbatim."""
    root.mkdir(parents=True, exist_ok=True)
    for relative_path, content in files.items():
        path = root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        text = content if isinstance(content, str) else json.dumps(content)
        path.write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def lang_tree(tmp_path: Path) -> TreeBuilder:
    """Return a builder writing a language directory under tmp_path/lang."""

    def build(files: Mapping[str, Any]) -> Path:
        return write_tree(tmp_path / "lang", files)

    return build


# Mirrors a typical application: plain groups, a nested group, vendor
# namespaces in both layouts, and non-resource files that must be ignored.
FIXTURE_FILES: dict[str, Any] = {
    "en/messages.json": {"welcome": "Welcome", "hash": "gm8ft2hrrlq1u6m54we9udi"},
    "en/validation.json": {"required": "The :attribute field is required."},
    "en/forum/thread.json": {"title": "Thread"},
    "en/vendor/acme/messages.json": {"hello": "Hello from Acme"},
    "es/messages.json": {"welcome": "Bienvenido"},
    "es/validation.yaml": "required: 'El campo :attribute es obligatorio.'\n",
    "vendor/nonameinc/ht/messages.json": {"hello": "Bonjou"},
    "en/README.md": "not a resource",
    "en/.hidden.json": {"secret": "no"},
}


@pytest.fixture
def fixture_tree(tmp_path: Path) -> Path:
    """Write the reference language tree and return its root."""
    return write_tree(tmp_path / "lang", FIXTURE_FILES)
