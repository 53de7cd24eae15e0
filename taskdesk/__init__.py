"""taskdesk: task creation service and dashboard for application follow-ups."""
