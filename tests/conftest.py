"""Shared fixtures for analysis text and organoleptic samples."""

import pytest


SAMPLE_ANALYSIS = """## Hasil Identifikasi

**Spesies:** Thunnus albacares (Yellowfin Tuna)
**Confidence:** 87%

**Karakteristik:**
- sirip punggung kedua berwarna kuning
- tubuh berbentuk torpedo
- finlet kuning dengan tepi hitam

Habitat: perairan pelagis tropis
Distribusi: Indo-Pasifik dan Atlantik
"""


@pytest.fixture
def sample_analysis():
    return SAMPLE_ANALYSIS


def uniform(grade):
    """All six parameters set to the same grade."""
    return {name: grade for name in ("eye", "gill", "slime", "flesh", "odor", "texture")}


@pytest.fixture
def uniform_grades():
    return uniform
