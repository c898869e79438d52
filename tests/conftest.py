"""Shared fixtures."""

import os

os.environ["REPORTUNIT_DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from reportunit.api.main import app
from reportunit.db import Base, engine


SCENARIO_A = """<?xml version="1.0" encoding="utf-8"?>
<assemblies>
  <assembly name="A" test-framework="xunit" run-date="2024-01-01" run-time="00:00:00"
            total="2" passed="1" failed="1" errors="0" skipped="0" time="1.5">
    <collection name="C" time="1.5">
      <test name="T1" result="Pass" time="1.0"/>
      <test name="T2" result="Fail" time="0.5">
        <failure>
          <message>boom</message>
          <stack-trace>at X</stack-trace>
        </failure>
      </test>
    </collection>
  </assembly>
</assemblies>
"""

MIXED = """<?xml version="1.0" encoding="utf-8"?>
<assemblies>
  <assembly name="Shop.Tests.dll" test-framework="xUnit.net 2.4.1" run-date="2024-03-05"
            run-time="10:15:42" total="6" passed="3" failed="1" errors="0" skipped="1" time="2.125">
    <errors/>
    <collection name="Cart tests" time="0.75">
      <test name="Cart.Add" result="Pass" time="0.25">
        <traits>
          <trait name="Area" value="Cart"/>
          <trait name="Priority" value="1"/>
        </traits>
      </test>
      <test name="Cart.Remove" result="Skip" time="0">
        <reason><![CDATA[flaky on CI]]></reason>
        <traits>
          <trait name="Area" value="Cart"/>
        </traits>
      </test>
    </collection>
    <collection name="Checkout tests" time="1.375">
      <test name="Checkout.Pay" result="Fail" time="1.125">
        <traits>
          <trait name="Area" value="Checkout"/>
        </traits>
        <failure exception-type="Xunit.Sdk.EqualException">
          <message>
            Assert.Equal() Failure
          </message>
          <stack-trace>   at Checkout.Pay() in Checkout.cs:line 42
</stack-trace>
        </failure>
      </test>
      <test name="Checkout.Refund" result="Pass" time="0.125"/>
    </collection>
    <collection name="Catalog tests" time="0">
      <test name="Catalog.List" result="Pass" time="0"/>
      <test name="Catalog.Search" result="NotRecognized" time="0"/>
    </collection>
    <collection name="Empty tests" time="0"/>
  </assembly>
</assemblies>
"""


@pytest.fixture
def write_xml(tmp_path):
    """Write XML content to a file and return its path."""

    def _write(content: str, name: str = "results.xml"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def client():
    """Test client backed by a fresh in-memory database."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def scenario_a_xml() -> str:
    return SCENARIO_A


@pytest.fixture
def mixed_xml() -> str:
    return MIXED
