"""
Column Template Expansion

The Metadata API lists some columns as templates: an id and uiName containing the
placeholder "XX" plus index bounds (e.g. ga:goalXXCompletions, bounds 1-20). This
module expands those templates into concrete columns for a specific account,
property and view.

Each templated column is offered to an ordered list of rules. The first rule that
claims it replaces it with zero or more concrete columns:

1. ga:metricXX     -> one column per custom metric
2. ga:dimensionXX  -> one column per custom dimension
3. *goal*          -> one column per goal
4. anything else   -> one column per index between the template bounds

Columns without template bounds are passed through untouched. Templates are deep
copied before any field is written, so inputs are never modified.
"""

import logging
import re
from copy import deepcopy
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from .models import Record

logger = logging.getLogger(__name__)

PLACEHOLDER = "XX"
CUSTOM_METRIC_TEMPLATE_ID = "ga:metricXX"
CUSTOM_DIMENSION_TEMPLATE_ID = "ga:dimensionXX"

_GOAL_PATTERN = re.compile("goal", re.IGNORECASE)


@dataclass(slots=True)
class ExpansionContext:
    """Account-specific entities used to fill column templates"""

    custom_metrics: Sequence[Record]
    custom_dimensions: Sequence[Record]
    goals: Sequence[Record]
    is_premium: bool = False


@dataclass(slots=True, frozen=True)
class TemplateRule:
    """A predicate that claims a templated column and the expansion it applies"""

    name: str
    matches: Callable[[Record], bool]
    expand: Callable[[Record, ExpansionContext], List[Record]]


def is_templated(column: Record) -> bool:
    """Whether a column declares template bounds"""
    return bool(column.get("attributes", {}).get("minTemplateIndex"))


def template_bounds(attributes: Record, is_premium: bool) -> Optional[Tuple[int, int]]:
    """
    Resolve the index range of a templated column

    Premium bounds apply only to premium properties and only when the column
    declares them.

    Args:
        attributes: Column attributes
        is_premium: Whether the property is premium

    Returns:
        (min, max) inclusive bounds, or None when the selected pair has no
        upper bound
    """
    if is_premium and attributes.get("premiumMinTemplateIndex"):
        low = attributes["premiumMinTemplateIndex"]
        high = attributes.get("premiumMaxTemplateIndex")
    else:
        low = attributes["minTemplateIndex"]
        high = attributes.get("maxTemplateIndex")
    if high is None or high == "":
        return None
    return int(low), int(high)


def _expand_entities(column: Record, entities: Sequence[Record], label: str) -> List[Record]:
    expanded = []
    for position, entity in enumerate(entities, start=1):
        new_column = deepcopy(column)
        new_column["id"] = entity["id"]
        new_column["attributes"]["uiName"] = f"{entity['name']} ({label} {position})"
        expanded.append(new_column)
    return expanded


def _expand_custom_metrics(column: Record, context: ExpansionContext) -> List[Record]:
    return _expand_entities(column, context.custom_metrics, "Custom Metric")


def _expand_custom_dimensions(column: Record, context: ExpansionContext) -> List[Record]:
    return _expand_entities(column, context.custom_dimensions, "Custom Dimension")


def _expand_goals(column: Record, context: ExpansionContext) -> List[Record]:
    ui_name = column["attributes"].get("uiName", column["id"])
    expanded = []
    for goal in context.goals:
        goal_id = str(goal["id"])
        new_column = deepcopy(column)
        new_column["id"] = column["id"].replace(PLACEHOLDER, goal_id)
        new_column["attributes"]["uiName"] = (
            f"{goal['name']} ({ui_name.replace(PLACEHOLDER, goal_id)})"
        )
        expanded.append(new_column)
    return expanded


def _expand_range(column: Record, context: ExpansionContext) -> List[Record]:
    bounds = template_bounds(column["attributes"], context.is_premium)
    if bounds is None:
        return []

    low, high = bounds
    ui_name = column["attributes"].get("uiName")
    expanded = []
    # An inverted range yields nothing
    for index in range(low, high + 1):
        new_column = deepcopy(column)
        new_column["id"] = column["id"].replace(PLACEHOLDER, str(index))
        if ui_name is not None:
            new_column["attributes"]["uiName"] = ui_name.replace(PLACEHOLDER, str(index))
        expanded.append(new_column)
    return expanded


TEMPLATE_RULES: Tuple[TemplateRule, ...] = (
    TemplateRule(
        name="custom_metric",
        matches=lambda column: column["id"] == CUSTOM_METRIC_TEMPLATE_ID,
        expand=_expand_custom_metrics,
    ),
    TemplateRule(
        name="custom_dimension",
        matches=lambda column: column["id"] == CUSTOM_DIMENSION_TEMPLATE_ID,
        expand=_expand_custom_dimensions,
    ),
    TemplateRule(
        name="goal",
        matches=lambda column: bool(_GOAL_PATTERN.search(column["id"])),
        expand=_expand_goals,
    ),
    TemplateRule(
        name="template_range",
        matches=lambda column: True,
        expand=_expand_range,
    ),
)


def find_rule(column: Record, rules: Sequence[TemplateRule] = TEMPLATE_RULES) -> Optional[TemplateRule]:
    """Return the first rule that claims a column, or None for plain columns"""
    if not is_templated(column):
        return None
    for rule in rules:
        if rule.matches(column):
            return rule
    return None


def populate_columns(
    columns: Sequence[Record],
    custom_metrics: Sequence[Record],
    custom_dimensions: Sequence[Record],
    goals: Sequence[Record],
    is_premium: bool = False,
) -> List[Record]:
    """
    Expand templated columns with account-specific data

    Args:
        columns: Items from metadata.columns.list
        custom_metrics: Items from management.customMetrics.list
        custom_dimensions: Items from management.customDimensions.list
        goals: Items from management.goals.list
        is_premium: True if the property is premium level

    Returns:
        New column list, in input order, with every template replaced by its
        concrete columns
    """
    context = ExpansionContext(
        custom_metrics=custom_metrics,
        custom_dimensions=custom_dimensions,
        goals=goals,
        is_premium=is_premium,
    )

    new_columns: List[Record] = []
    for column in columns:
        rule = find_rule(column)
        if rule is None:
            new_columns.append(column)
            continue

        expanded = rule.expand(column, context)
        logger.debug("Expanded %s via %s into %d columns", column["id"], rule.name, len(expanded))
        new_columns.extend(expanded)

    logger.debug("Populated %d columns from %d templates", len(new_columns), len(columns))
    return new_columns
