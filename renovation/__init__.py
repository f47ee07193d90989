"""
renovation - Building Renovation Simulator

Models a building whose attributes (height, cost, energy efficiency and
aesthetic value) are changed by an ordered plan of improvements.

Modules:
    - core: constants, settings, logging and exceptions
    - domain: Pydantic models for buildings and improvements
    - application: plan factory and step-by-step renovation simulator
    - scenarios: named scenario checks and their pass/fail runner
"""

__version__ = "1.0.0"
