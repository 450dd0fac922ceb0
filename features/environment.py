"""
Behave environment configuration for DNS Provider Capabilities tests.
"""

import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def before_scenario(context, scenario):
    """Set up each test scenario."""
    context.registry = None
    context.result = None
    context.error = None
    logger.info(f"Starting scenario: {scenario.name}")


def after_scenario(context, scenario):
    """Clean up after each test scenario."""
    context.registry = None
    logger.info(f"Completed scenario: {scenario.name}")
