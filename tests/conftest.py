from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from gradle_patterns.domain.policy import ConventionPolicy, PolicyBuilder
from tests.helpers.conventions import DOCS, KOTLIN, SPRING, TEST

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def exclude_policy() -> ConventionPolicy:
    return ConventionPolicy(
        default_conventions=(KOTLIN, TEST),
        excluded_units=frozenset({"legacy"}),
    )


@pytest.fixture
def enterprise_policy() -> ConventionPolicy:
    return (
        PolicyBuilder()
        .apply_to_all(KOTLIN, TEST, "optimization-convention", "dependencies-convention")
        .exclude(":legacy-module", ":experimental")
        .for_unit(":user-service", KOTLIN, SPRING, TEST, "dependencies-convention")
        .for_unit(":common-lib", KOTLIN, TEST, DOCS)
        .build()
    )


@pytest.fixture
def policy_toml(tmp_path: Path) -> Path:
    path = tmp_path / "policy.toml"
    path.write_text(
        "\n".join(
            [
                'apply-to-all = ["kotlin-convention", "test-convention"]',
                'exclude = [":legacy-module"]',
                "",
                "[overrides]",
                '":user-service" = ["kotlin-convention", "spring-convention"]',
                "",
            ]
        ),
        encoding="utf-8",
    )
    return path
