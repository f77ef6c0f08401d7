"""Plan builder — turns questionnaire answers into a multi-day plan."""

from workout_engine.plan_builder.generator import PlanGenerator, generate_plan

__all__ = ["PlanGenerator", "generate_plan"]
