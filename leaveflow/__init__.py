"""LeaveFlow: leave-request management with live notifications.

The package re-exports nothing; import from the layer subpackages
(``domain``, ``application``, ``infrastructure`` and ``interfaces``).
"""
