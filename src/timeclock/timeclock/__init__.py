"""Timeclock package.

Employee time tracking organised by feature modules (users, days, tasks,
leave, jobs, reports, ...) with a thin Flask JSON controller layer over
service and repository layers.
"""
