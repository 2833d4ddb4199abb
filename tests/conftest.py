"""Shared fixtures: a small curriculum tree on disk."""

from pathlib import Path

import pytest

SETUP_MODULE = """# Development Environment Setup

Set up the tools you need for the rest of the course.
This second line is not part of the description.

## Learning Objectives
- Install a code editor
- Configure Git

## Prerequisites
- A computer with internet access

## Key Concepts
- **Terminal**: the command line interface
- **Editor**: where code is written
- An ordinary bullet

## Practice
- **Project 1**: Build a landing page
**Project Brief**: Deploy the site to the web
"""

HTML_MODULE = """# HTML and CSS Basics

Structure and style web pages.

## Overview
- Tags and selectors
"""

OVERVIEW_DOC = """# Core Syntax Overview

A quick-reference guide to the most important syntax.

## JavaScript: Core Syntax & Operators
## CSS: Selectors, Combinators & Units
"""

PHASE_0_README = """# Phase 0

## Overview

This phase covers the essential foundations.
Second line of the overview.

## Modules
"""

REACT_MODULE = """Notes without any headings at all.
"""

BUILD_TOOLS_MODULE = """# Modern Build Tools

## Learning Objectives
- Configure a bundler
"""


def write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def curriculum_root(tmp_path):
    """
    Phase 0: two modules, the overview document, a README, and noise files
    Phase 1: exists but empty
    Phase 2: one module without headings
    Phase 6: one module
    Other phases are absent.
    """
    root = tmp_path / "curriculum"
    phase0 = root / "Phase-0-Absolute-Beginnings"
    write(phase0 / "Module-0.1-Development-Environment-Setup.md", SETUP_MODULE)
    write(phase0 / "Module-0.2-HTML-and-CSS-Basics.md", HTML_MODULE)
    write(phase0 / "Core-Syntax-Overview.md", OVERVIEW_DOC)
    write(phase0 / "README.md", PHASE_0_README)
    write(phase0 / "notes.txt", "not a module")
    write(phase0 / "Draft.md", "# Draft\n")

    (root / "Phase-1-Foundation-Technologies").mkdir(parents=True)

    write(root / "Phase-2-React-Development-Mastery" / "Module-2.1-React-Intro.md", REACT_MODULE)
    write(
        root / "Phase-6-Build-Tools-and-Development-Workflow" / "Module-6.1-Modern-Build-Tools.md",
        BUILD_TOOLS_MODULE,
    )
    return root
