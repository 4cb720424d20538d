"""Pytest configuration for the transync test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: CI runs with 50 examples (fast feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/
"""

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var
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
# SHARED FIXTURES
# =============================================================================

SAMPLE_DOCUMENT = """<?php

return [
    'ar' => [
        "welcome.title" => "مرحبا",
    ],

    'en' => [
        "welcome.title" => "Hello",
        "old.key" => "Old",
    ]
];
"""


@pytest.fixture
def views_dir(tmp_path: Path) -> Path:
    """A views directory with one paired view and one unpaired view."""
    views = tmp_path / "views"
    views.mkdir()
    (views / "home.blade.php").write_text(
        "<h1>{{ __('welcome.title') }}</h1>\n<p>@lang('welcome.body')</p>\n",
        encoding="utf-8",
    )
    (views / "home.php").write_text(SAMPLE_DOCUMENT, encoding="utf-8")
    (views / "about.blade.php").write_text("{{ __('about.title') }}\n", encoding="utf-8")
    return views
