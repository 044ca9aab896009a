"""Attendance Dashboard package.

Feature modules (attendance, mcid, files, analytics) sit on top of one shared
tabular data explorer, with a thin Flask controller layer and service /
repository layers that talk to the remote attendance backend over HTTP.
"""
