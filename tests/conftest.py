"""Shared fixtures: a trimmed-down copy of the events-that-trigger-workflows page."""

import pytest

from webhook_events.preprocess import MarkdownPreprocessor

EVENTS_MARKDOWN = """\
---
title: Events that trigger workflows
---

## About workflow triggers

| Webhook event payload | Activity types |
| --------------------- | -------------- |
| [`too_early`](/webhooks#too_early) | - `ignored` |

## About events that trigger workflows

Workflow triggers are events that cause a workflow to run.

## `branch_protection_rule`

| Webhook event payload | Activity types | `GITHUB_SHA` | `GITHUB_REF` |
| --------------------- | -------------- | ------------ | ------------ |
| [`branch_protection_rule`](/webhooks#branch_protection_rule) | - `created`<br/>- `edited`<br/>- `deleted` | Last commit on default branch | Default branch |

{% note %}

More than one activity type triggers this event.

{% endnote %}

## `pull_request`

| Webhook event payload | Activity types |
| --------------------- | -------------- |
| [**pull**_request](/webhooks#pull_request) | - `assigned`<br/>- `opened` |
| [`pull_request_review`](/webhooks#pull_request_review) | - `submitted` |

## `push`

| Event | Value |
| ----- | ----- |
| foo   | bar   |

| Webhook event payload | Activity types |
| --------------------- | -------------- |
| [`push`](/webhooks#push) (see the note below) | Not applicable |

## `schedule`

| Webhook event payload | Activity types |
| --------------------- | -------------- |
| Not applicable | Not applicable |

## `workflow_call`

| Webhook event payload | Activity types |
| --------------------- | -------------- |
| Same as the caller workflow | Not applicable |
"""

EXPECTED_EVENTS = {
    "branch_protection_rule": ["created", "edited", "deleted"],
    "pull_request": ["assigned", "opened"],
    "push": [],
}


@pytest.fixture
def events_markdown() -> str:
    return EVENTS_MARKDOWN


@pytest.fixture
def preprocessor() -> MarkdownPreprocessor:
    return MarkdownPreprocessor()



@pytest.fixture
def expected_events() -> dict:
    return {name: list(types) for name, types in EXPECTED_EVENTS.items()}
