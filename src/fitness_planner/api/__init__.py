"""HTTP API for the Fitness Planner."""
