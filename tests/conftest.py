from copy import deepcopy

import pytest

ACCOUNT_SUMMARIES = [
    {
        "id": "1001",
        "kind": "analytics#accountSummary",
        "name": "Account A",
        "webProperties": [
            {
                "id": "UA-1001-1",
                "name": "Property A1",
                "level": "STANDARD",
                "profiles": [
                    {"id": "2001", "name": "View A1a", "type": "WEB"},
                    {"id": "2002", "name": "View A1b", "type": "WEB"},
                ],
            },
            {
                "id": "UA-1001-2",
                "name": "Property A2",
                "level": "PREMIUM",
            },
        ],
    },
    {
        "id": "1002",
        "kind": "analytics#accountSummary",
        "name": "Account B",
        "webProperties": [
            {
                "id": "UA-1002-1",
                "name": "Property B1",
                "level": "STANDARD",
                "profiles": [{"id": "2003", "name": "View B1a", "type": "APP"}],
            }
        ],
    },
    {
        "id": "1003",
        "kind": "analytics#accountSummary",
        "name": "Account C",
    },
]

COLUMNS = [
    {
        "id": "ga:sessions",
        "kind": "analytics#column",
        "attributes": {
            "type": "METRIC",
            "dataType": "INTEGER",
            "group": "Session",
            "status": "PUBLIC",
            "uiName": "Sessions",
        },
    },
    {
        "id": "ga:browser",
        "kind": "analytics#column",
        "attributes": {
            "type": "DIMENSION",
            "dataType": "STRING",
            "group": "Platform or Device",
            "status": "PUBLIC",
            "uiName": "Browser",
        },
    },
    {
        "id": "ga:visits",
        "kind": "analytics#column",
        "attributes": {
            "type": "METRIC",
            "dataType": "INTEGER",
            "group": "Session",
            "status": "DEPRECATED",
            "uiName": "Visits",
        },
    },
    {
        "id": "ga:metricXX",
        "kind": "analytics#column",
        "attributes": {
            "type": "METRIC",
            "dataType": "INTEGER",
            "group": "Custom Variables or Columns",
            "status": "PUBLIC",
            "uiName": "Custom Metric XX Value",
            "minTemplateIndex": "1",
            "maxTemplateIndex": "20",
            "premiumMinTemplateIndex": "1",
            "premiumMaxTemplateIndex": "200",
        },
    },
    {
        "id": "ga:dimensionXX",
        "kind": "analytics#column",
        "attributes": {
            "type": "DIMENSION",
            "dataType": "STRING",
            "group": "Custom Variables or Columns",
            "status": "PUBLIC",
            "uiName": "Custom Dimension XX",
            "minTemplateIndex": "1",
            "maxTemplateIndex": "20",
            "premiumMinTemplateIndex": "1",
            "premiumMaxTemplateIndex": "200",
        },
    },
    {
        "id": "ga:goalXXCompletions",
        "kind": "analytics#column",
        "attributes": {
            "type": "METRIC",
            "dataType": "INTEGER",
            "group": "Goal Conversions",
            "status": "PUBLIC",
            "uiName": "Goal XX Completions",
            "minTemplateIndex": "1",
            "maxTemplateIndex": "20",
        },
    },
    {
        "id": "ga:customVarNameXX",
        "kind": "analytics#column",
        "attributes": {
            "type": "DIMENSION",
            "dataType": "STRING",
            "group": "Custom Variables or Columns",
            "status": "PUBLIC",
            "uiName": "Custom Variable (Key XX)",
            "minTemplateIndex": "1",
            "maxTemplateIndex": "5",
            "premiumMinTemplateIndex": "1",
            "premiumMaxTemplateIndex": "50",
        },
    },
    {
        "id": "ga:segment",
        "kind": "analytics#column",
        "attributes": {
            "type": "SEGMENT",
            "dataType": "STRING",
            "group": "Segments",
            "status": "PUBLIC",
            "uiName": "Segment",
        },
    },
]

CUSTOM_METRICS = [
    {"id": "ga:metric1", "name": "Revenue", "index": 1},
    {"id": "ga:metric2", "name": "Downloads", "index": 2},
]

CUSTOM_DIMENSIONS = [
    {"id": "ga:dimension1", "name": "Author", "index": 1},
]

GOALS = [
    {"id": "1", "name": "Signup"},
    {"id": "3", "name": "Purchase"},
]


@pytest.fixture
def summaries_items():
    """Fresh copy of a three-account summaries listing"""
    return deepcopy(ACCOUNT_SUMMARIES)


@pytest.fixture
def column_items():
    """Fresh copy of a metadata columns listing"""
    return deepcopy(COLUMNS)


@pytest.fixture
def custom_metrics():
    return deepcopy(CUSTOM_METRICS)


@pytest.fixture
def custom_dimensions():
    return deepcopy(CUSTOM_DIMENSIONS)


@pytest.fixture
def goals():
    return deepcopy(GOALS)
