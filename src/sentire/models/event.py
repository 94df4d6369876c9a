"""
Event models.

An event is a single error or message occurrence as stored by Sentry,
including its stack traces, breadcrumbs, request data and runtime contexts.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field, JsonValue

from sentire.models.base import Record


class Entry(Record):
    """Typed block of event payload (exception, breadcrumbs, request, ...)."""

    type: str = ""
    data: JsonValue = None


class Mechanism(Record):
    """How an exception was captured."""

    type: str = ""
    description: str | None = None
    handled: bool | None = None
    data: dict[str, JsonValue] | None = None
    meta: dict[str, JsonValue] | None = None


class StackFrame(Record):
    """Single frame in a stack trace."""

    filename: str | None = None
    function: str | None = None
    module: str | None = None
    line_no: int | None = Field(default=None, alias="lineNo")
    col_no: int | None = Field(default=None, alias="colNo")
    abs_path: str | None = Field(default=None, alias="absPath")
    context_line: str | None = Field(default=None, alias="contextLine")
    pre_context: list[str] | None = Field(default=None, alias="preContext")
    post_context: list[str] | None = Field(default=None, alias="postContext")
    in_app: bool | None = Field(default=None, alias="inApp")
    vars: dict[str, JsonValue] | None = None
    package: str | None = None
    platform: str | None = None
    instruction_addr: str | None = Field(default=None, alias="instructionAddr")
    symbol: str | None = None


class Stacktrace(Record):
    """Ordered stack frames, innermost last."""

    frames: list[StackFrame] = Field(default_factory=list)
    frames_omitted: list[int] | None = Field(default=None, alias="framesOmitted")
    registers: dict[str, str] | None = None
    has_system_frames: bool | None = Field(default=None, alias="hasSystemFrames")


class ExceptionValue(Record):
    """A single exception in a chain, with its stack trace."""

    type: str = ""
    value: str | None = None
    module: str | None = None
    thread_id: int | None = Field(default=None, alias="threadId")
    mechanism: Mechanism | None = None
    stacktrace: Stacktrace | None = None
    raw_stacktrace: Stacktrace | None = Field(default=None, alias="rawStacktrace")


class EventException(Record):
    """Exception interface of an event."""

    values: list[ExceptionValue] = Field(default_factory=list)


class Breadcrumb(Record):
    """Single breadcrumb recorded before the event."""

    timestamp: datetime | None = None
    type: str | None = None
    category: str | None = None
    message: str | None = None
    level: str | None = None
    data: dict[str, JsonValue] | None = None


class Breadcrumbs(Record):
    """Breadcrumb trail."""

    values: list[Breadcrumb] = Field(default_factory=list)


class EventRequest(Record):
    """HTTP request that was being handled when the event occurred."""

    url: str | None = None
    method: str | None = None
    headers: JsonValue = None
    data: JsonValue = None
    query_string: JsonValue = Field(default=None, alias="queryString")
    cookies: JsonValue = None
    env: dict[str, JsonValue] | None = None
    fragment: str | None = None
    inferred_content_type: str | None = Field(default=None, alias="inferredContentType")


class BrowserContext(Record):
    name: str | None = None
    version: str | None = None
    type: str | None = None


class OSContext(Record):
    name: str | None = None
    version: str | None = None
    build: str | None = None
    kernel_version: str | None = Field(default=None, alias="kernelVersion")
    rooted: bool | None = None
    type: str | None = None


class RuntimeContext(Record):
    name: str | None = None
    version: str | None = None
    build: str | None = None
    type: str | None = None


class DeviceContext(Record):
    name: str | None = None
    family: str | None = None
    model: str | None = None
    arch: str | None = None
    simulator: bool | None = None
    memory_size: int | None = Field(default=None, alias="memorySize")
    free_memory: int | None = Field(default=None, alias="freeMemory")
    processor_count: int | None = Field(default=None, alias="processorCount")
    type: str | None = None


class AppContext(Record):
    app_name: str | None = Field(default=None, alias="appName")
    app_version: str | None = Field(default=None, alias="appVersion")
    app_build: str | None = Field(default=None, alias="appBuild")
    app_identifier: str | None = Field(default=None, alias="appIdentifier")
    app_start_time: datetime | None = Field(default=None, alias="appStartTime")
    build_type: str | None = Field(default=None, alias="buildType")
    type: str | None = None


class TraceContext(Record):
    trace_id: str | None = Field(default=None, alias="traceId")
    span_id: str | None = Field(default=None, alias="spanId")
    parent_span_id: str | None = Field(default=None, alias="parentSpanId")
    op: str | None = None
    description: str | None = None
    status: str | None = None
    tags: dict[str, JsonValue] | None = None
    data: dict[str, JsonValue] | None = None
    type: str | None = None


class Contexts(Record):
    """Runtime contexts attached to an event."""

    browser: BrowserContext | None = None
    client_os: OSContext | None = None
    os: OSContext | None = None
    device: DeviceContext | None = None
    runtime: RuntimeContext | None = None
    app: AppContext | None = None
    trace: TraceContext | None = None


class EventTag(Record):
    key: str
    value: str


class EventUser(Record):
    id: str | None = None
    username: str | None = None
    email: str | None = None
    ip_address: str | None = None


class EventRelease(Record):
    version: str
    short_version: str | None = Field(default=None, alias="shortVersion")


class EventSDK(Record):
    name: str
    version: str


class EventError(Record):
    """Processing error recorded by Sentry while ingesting the event."""

    type: str = ""
    name: str | None = None
    message: str | None = None
    data: dict[str, JsonValue] | None = None


class Event(Record):
    """A complete Sentry event."""

    id: str
    event_id: str = Field(default="", alias="eventID")
    project_id: str = Field(default="", alias="projectID")
    group_id: str | None = Field(default=None, alias="groupID")
    title: str = ""
    message: str = ""
    platform: str = ""
    type: str = ""
    date_created: datetime | None = Field(default=None, alias="dateCreated")
    date_received: datetime | None = Field(default=None, alias="dateReceived")
    size: int = 0
    dist: str | None = None
    location: str | None = None
    logger: str | None = None
    culprit: str | None = None

    # Debugging payload
    entries: list[Entry] = Field(default_factory=list)
    exception: EventException | None = None
    breadcrumbs: Breadcrumbs | None = None
    request: EventRequest | None = None

    # Context and metadata
    tags: list[EventTag] = Field(default_factory=list)
    user: EventUser | None = None
    contexts: Contexts | None = None
    extra: dict[str, JsonValue] | None = None
    metadata: dict[str, JsonValue] | None = None
    fingerprint: list[str] = Field(default_factory=list)

    # Release and SDK
    release: EventRelease | None = None
    environment: str | None = None
    sdk: EventSDK | None = None

    errors: list[EventError] | None = None

    def describe(self) -> list[tuple[str, Any]]:
        pairs: list[tuple[str, Any]] = [
            ("ID", self.id),
            ("Event ID", self.event_id),
            ("Title", self.title),
            ("Message", self.message),
            ("Platform", self.platform),
            ("Type", self.type),
            ("Project ID", self.project_id),
            ("Date Created", self.date_created),
            ("Date Received", self.date_received),
            ("Size", self.size),
        ]
        optional = [
            ("Group ID", self.group_id),
            ("Logger", self.logger),
            ("Culprit", self.culprit),
            ("Environment", self.environment),
        ]
        pairs.extend((label, value) for label, value in optional if value)
        return pairs
