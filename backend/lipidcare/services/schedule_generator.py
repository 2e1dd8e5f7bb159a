"""Seven day routine generation with a guaranteed built-in fallback."""
from __future__ import annotations

import asyncio
import json
import logging
import re
from dataclasses import dataclass
from time import perf_counter
from typing import Literal, Optional

from pydantic import ValidationError

from lipidcare.core.config import settings
from lipidcare.domain.profile import UserProfile
from lipidcare.domain.result import GenerationFailure, GenerationResult
from lipidcare.domain.schedule import MAX_ITEMS_PER_DAY, MIN_ITEMS_PER_DAY, WeeklySchedule
from lipidcare.observability.metrics import log_metric
from lipidcare.observability.tracing import trace
from lipidcare.services import completion_client

logger = logging.getLogger(__name__)

ScheduleSource = Literal["ai", "fallback"]

_CODE_FENCE = re.compile(r"```(?:json)?", re.IGNORECASE)


@dataclass(frozen=True)
class GeneratedSchedule:
    schedule: WeeklySchedule
    source: ScheduleSource
    failure: Optional[GenerationFailure] = None


def build_prompt(profile: UserProfile, locale: str | None = None) -> str:
    """Describe the profile and the exact JSON shape the service must return."""
    language = locale or settings.schedule_locale
    return (
        "Based on this user profile, create a detailed, non-repetitive 7-day triglyceride "
        "management program as JSON.\n"
        "Profile:\n"
        f"- Current triglyceride level: {profile.level_label} mg/dL\n"
        f"- Wake: {profile.wake_time}, Sleep: {profile.sleep_time}\n"
        f"- Work schedule: {profile.work_schedule.value}\n"
        f"- Exercise level: {profile.exercise_level.value}\n"
        f"- Diet: {profile.dietary_preference.value}\n"
        "\n"
        "Requirements for the JSON:\n"
        '1. "weekSchedule": an array of exactly 7 days, each with "day" (weekday label).\n'
        '2. Each day has a unique central "theme" such as a cardio day or an omega-3 day.\n'
        f'3. "hourlySchedule": {MIN_ITEMS_PER_DAY}-{MAX_ITEMS_PER_DAY} events per day ordered by time, '
        'each with "time" (HH:MM), "activity", "category" (one of meal, exercise, general), '
        '"details" and "benefit".\n'
        '4. "dailySummary": an object with "fastingWindow" (e.g. "14 hours") and "intensity" '
        '(e.g. "moderate").\n'
        '5. "weeklyGuidelines": an object with "dietaryPrinciples" (array of short rules) and '
        '"expectedProgress" (one sentence).\n'
        "6. Vary the exercise types and meals from day to day to avoid repetition.\n"
        "7. Return ONLY the JSON object. No Markdown.\n"
        f"8. Language: {language}.\n"
    )


def strip_code_fence(text: str) -> str:
    """Remove markdown code fence markers wrapped around a JSON payload."""
    if not isinstance(text, str):
        raise TypeError(f"Expected completion text, got {type(text).__name__}")
    return _CODE_FENCE.sub("", text).strip()


def parse_schedule(text: str) -> WeeklySchedule:
    """Parse raw completion text into a WeeklySchedule.

    Raises json.JSONDecodeError for text that is not JSON and
    pydantic.ValidationError when the JSON does not have the weekly shape.
    """
    payload = json.loads(strip_code_fence(text))
    return WeeklySchedule.model_validate(payload)


async def try_generate(profile: UserProfile) -> GenerationResult:
    """Attempt an AI-authored schedule and report why it failed if it did."""
    client = completion_client.get_completion_client()
    if client is None:
        # Keep the generating phase observable even when nothing is requested.
        await asyncio.sleep(settings.fallback_delay_seconds)
        return GenerationResult.err("no_credential", "No AI credential configured")

    prompt = build_prompt(profile)
    try:
        raw_text = await asyncio.wait_for(
            client.complete(prompt),
            timeout=settings.generation_timeout_seconds,
        )
    except asyncio.TimeoutError:
        return GenerationResult.err(
            "timeout",
            f"AI completion exceeded {settings.generation_timeout_seconds:g}s",
        )
    except Exception as exc:
        return GenerationResult.err("transport", f"{type(exc).__name__}: {exc}")

    try:
        schedule = parse_schedule(raw_text)
    except json.JSONDecodeError as exc:
        return GenerationResult.err("parse", f"Response is not JSON: {exc.msg}")
    except ValidationError as exc:
        return GenerationResult.err("schema", f"Response does not match the weekly schema: {exc.error_count()} error(s)")
    except Exception as exc:
        return GenerationResult.err("parse", f"Unreadable response: {type(exc).__name__}: {exc}")
    return GenerationResult.ok(schedule)


async def generate_with_source(
    profile: UserProfile,
    *,
    session_id: str | None = None,
    request_id: str | None = None,
) -> GeneratedSchedule:
    """Produce a schedule and record whether it came from the AI or the fallback.

    Never raises for generation problems; only cancellation escapes.
    """
    start = perf_counter()
    metadata = {
        "current_level": profile.current_level,
        "dietary_preference": profile.dietary_preference.value,
        "exercise_level": profile.exercise_level.value,
    }
    with trace(
        "schedule.generate",
        metadata=metadata,
        session_id=session_id,
        request_id=request_id,
    ) as generation_trace:
        result = await try_generate(profile)
        schedule = result.unwrap_or_fallback()
        source: ScheduleSource = "ai" if result.is_ok else "fallback"
        if generation_trace:
            generation_trace.update(
                metadata={
                    **metadata,
                    "source": source,
                    "failure_kind": result.failure.kind if result.failure else None,
                }
            )

    if result.failure is not None:
        level = logging.INFO if result.failure.kind == "no_credential" else logging.WARNING
        logger.log(
            level,
            "Using fallback schedule (%s): %s",
            result.failure.kind,
            result.failure.message,
        )

    latency_ms = (perf_counter() - start) * 1000
    log_metric(
        "schedule.generate.fallback",
        0 if result.is_ok else 1,
        metadata={"failure_kind": result.failure.kind if result.failure else None},
    )
    log_metric("schedule.generate.latency_ms", latency_ms, metadata={"source": source})
    return GeneratedSchedule(schedule=schedule, source=source, failure=result.failure)


async def generate(profile: UserProfile) -> WeeklySchedule:
    """Return a usable weekly schedule for any profile."""
    generated = await generate_with_source(profile)
    return generated.schedule
