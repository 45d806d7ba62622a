"""Time Clock package.

Employees clock in/out with a short code; admins manage the roster, pull
daily/weekly/monthly/custom attendance reports and get a scheduled Excel
export by email. Organised by feature module (employees, sessions, reports)
with a thin Flask controller layer over service/repository layers.
"""
