"""
routers/ - HTTP routes

Modules:
    health.py       - Root banner and health check
    employees.py    - Resume intake and per-employee reads
    evaluations.py  - 360-degree evaluation intake
    expertise.py    - Expertise score listing
"""
