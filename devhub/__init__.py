"""
DevHub Dashboard - GitHub repositories and merged pull-request contributions.

Serves an HTML/JSON dashboard built from the GitHub REST API and a small
proxy endpoint that lists repositories with a caller-supplied token.
"""
