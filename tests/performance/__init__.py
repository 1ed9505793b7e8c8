"""
Performance testing package (Locust-based).

Contains the Animals API load-test scenario: the Locust user class and
ramp shape, run lifecycle (setup probe, teardown cleanup), custom
metric collectors, summary reporting, and a CI threshold checker.

The scenario drives any API exposing the animals collection contract:
the hosted mock API by default, or the local Flask service in
:mod:`app` when ``--host`` points at it.

Key Concepts Demonstrated:
- Sequential CRUD iteration with data dependencies between requests
- Per-operation success/error counters and latency trends
- Staged virtual-user ramp via ``LoadTestShape``
- Threshold gates for automated pass/fail decisions
"""
