"""Create-task page: form posting JSON to /create-task."""

from html import escape

from taskdesk.domain.enums import TaskType
from taskdesk.pages._layout import render_page

_SCRIPT = """
        var form = document.getElementById('create-form');
        var submit = document.getElementById('submit');
        var okEl = document.getElementById('ok');
        var errEl = document.getElementById('err');

        form.addEventListener('submit', function (e) {
            e.preventDefault();
            okEl.classList.add('hidden');
            errEl.classList.add('hidden');
            submit.disabled = true;
            submit.textContent = 'Creating...';
            var local = form.due_at.value;
            var payload = {
                application_id: form.application_id.value,
                task_type: form.task_type.value,
                due_at: local ? new Date(local).toISOString() : ''
            };
            fetch('/create-task', {
                method: 'POST',
                headers: taskdeskHeaders({ 'Content-Type': 'application/json' }),
                body: JSON.stringify(payload)
            })
                .then(function (res) {
                    return res.json().then(function (data) {
                        if (!res.ok) throw new Error(data.error || 'Failed to create task');
                        return data;
                    });
                })
                .then(function (data) {
                    okEl.textContent = 'Task created successfully! Task ID: ' + data.task_id;
                    okEl.classList.remove('hidden');
                    form.reset();
                })
                .catch(function (err) {
                    errEl.textContent = err.message;
                    errEl.classList.remove('hidden');
                })
                .finally(function () {
                    submit.disabled = false;
                    submit.textContent = 'Create Task';
                });
        });"""


def render_create_task_page(app_name: str) -> str:
    """Return HTML for the create-task form. Type options come from TaskType."""
    options = "\n".join(
        f'                    <option value="{escape(t)}">{escape(t.capitalize())}</option>'
        for t in TaskType.values()
    )
    body = f"""
        <header class="top">
            <h1>Create Task</h1>
            <a href="/dashboard/today" class="btn">Back to Today</a>
        </header>
        <section class="card">
            <form id="create-form">
                <label>Application ID
                    <input type="text" name="application_id" placeholder="Enter application ID" required>
                </label>
                <label>Task type
                    <select name="task_type">
{options}
                    </select>
                </label>
                <label>Due at
                    <input type="datetime-local" name="due_at" required>
                </label>
                <button type="submit" id="submit" class="btn primary">Create Task</button>
            </form>
            <div id="ok" class="msg ok hidden"></div>
            <div id="err" class="msg err hidden"></div>
        </section>"""
    return render_page(f"Create task - {app_name}", body, _SCRIPT)
