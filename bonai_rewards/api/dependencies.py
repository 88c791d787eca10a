"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request

from bonai_rewards.domain.animation import AnimationSequencer
from bonai_rewards.infrastructure.bill_store import BillCollection
from bonai_rewards.infrastructure.schedulers import ManualScheduler


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_bill_collection(request: Request) -> BillCollection:
    """Provide the process-wide bill collection created by the app factory"""
    return request.app.state.bill_collection


def get_scheduler() -> ManualScheduler:
    """Provide a fresh virtual clock for one preview render"""
    return ManualScheduler()


def get_sequencer(scheduler: ManualScheduler = Depends(get_scheduler)) -> AnimationSequencer:
    """Provide a sequencer driven by the request's virtual clock"""
    return AnimationSequencer(scheduler)
