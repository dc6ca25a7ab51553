"""Shared test configuration and fixtures for actions-model tests."""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def sample_workflow():
    """Standard valid workflow for testing."""
    return """
name: Test Workflow
on:
  push:
    branches: [main]
  pull_request:
    branches: [main]

jobs:
  test:
    runs-on: ubuntu-latest
    strategy:
      matrix:
        node: [16, 18]
        os: [ubuntu-latest, windows-latest]
    steps:
      - name: Checkout
        uses: actions/checkout@v4
      - name: Setup Node
        uses: actions/setup-node@v4
        with:
          node-version: ${{ matrix.node }}
      - run: npm test
  deploy:
    name: Deploy site
    needs: test
    runs-on: ubuntu-latest
    steps:
      - run: ./deploy.sh
        shell: sh
"""


@pytest.fixture
def invalid_workflow():
    """Workflow whose 'needs' holds a mapping inside a list."""
    return """
on: push
jobs:
  build:
    runs-on: ubuntu-latest
    needs:
      - test: true
    steps:
      - run: make
"""


@pytest.fixture
def temp_workflow_file():
    """Create a temporary workflow file for testing."""

    def _create_temp_file(content: str) -> Path:
        temp_file = tempfile.NamedTemporaryFile(suffix=".yml", mode="w+", delete=False)
        temp_file.write(content)
        temp_file.close()
        return Path(temp_file.name)

    return _create_temp_file
