"""
Vulnerability Assist: schema-validated AI suggestions for vulnerability triage.
"""
