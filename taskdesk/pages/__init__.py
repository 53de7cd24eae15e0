"""HTML pages: landing page and dashboard (today's tasks, create task)."""

from taskdesk.pages.create_task import render_create_task_page
from taskdesk.pages.root import render_root_page
from taskdesk.pages.today import render_today_page

__all__ = ["render_create_task_page", "render_root_page", "render_today_page"]
