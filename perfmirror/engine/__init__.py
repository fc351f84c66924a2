"""IOOI scoring and evaluation engine.

Sub-modules:
- dimensions        - log entries → per-dimension point totals
- scoring           - weighted / raw scores, weekly series, breakdown
- bands             - five-band classification against a target
- insights          - distribution and expected-activity observations
- expected_activity - logged counts vs template expectations
- coverage          - level-expectation evidence and growth suggestions
- trend             - direction of the weekly score series
"""
