"""Structured JSON logging"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from bonai_rewards.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_card_toggle(card_index: int, direction: str, progress: float) -> None:
    """Log an expansion toggle with the progress it retargeted from"""
    logging.getLogger("bonai_rewards.cards").debug(
        "Card toggled",
        extra={
            "card_index": card_index,
            "direction": direction,
            "progress": round(progress, 3),
        },
    )


def log_brand_claim(brand_name: str, reward_amount: int) -> None:
    """Log a reward applied to a brand"""
    logging.getLogger("bonai_rewards.rewards").info(
        "Reward claimed",
        extra={
            "step": "reward_claimed",
            "brand": brand_name,
            "reward_amount": reward_amount,
        },
    )
