"""Root landing page with links to the dashboard and API docs."""

from html import escape

from taskdesk.pages._layout import render_page


def render_root_page(app_name: str) -> str:
    """Return HTML for the root landing page."""
    name = escape(app_name)
    body = f"""
        <header class="top"><h1>{name}</h1></header>
        <section class="card">
            <p>Task management dashboard. Create follow-up tasks for applications
            and work through what is due today.</p>
            <p>
                <a href="/dashboard/today" class="btn primary">Today's tasks</a>
                <a href="/dashboard/create-task" class="btn">Create task</a>
                <a href="/docs" class="btn">API docs</a>
            </p>
        </section>
        <section class="card">
            <p>Tasks are created with <code>POST /create-task</code>; the dashboard
            reads <code>/api/v1/tasks/today</code>. When the server enforces an API key,
            store it once in this browser:</p>
            <p><code>localStorage.setItem('taskdesk_api_key', '&lt;key&gt;')</code></p>
        </section>"""
    return render_page(app_name, body)
