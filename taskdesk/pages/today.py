"""Today's tasks page: open tasks due in the current UTC day, with a complete button per row."""

from taskdesk.pages._layout import render_page

_BODY = """
        <header class="top">
            <h1>Today's Tasks</h1>
            <a href="/dashboard/create-task" class="btn">Create Task</a>
        </header>
        <div id="status" class="card empty">Loading tasks...</div>
        <div id="error" class="msg err hidden"></div>
        <section id="list" class="card hidden">
            <table>
                <thead>
                    <tr><th>Type</th><th>Application</th><th>Due (UTC)</th><th>Status</th><th></th></tr>
                </thead>
                <tbody id="rows"></tbody>
            </table>
        </section>"""

_SCRIPT = """
        var rows = document.getElementById('rows');
        var statusEl = document.getElementById('status');
        var errorEl = document.getElementById('error');
        var listEl = document.getElementById('list');

        function showError(message) {
            errorEl.textContent = 'Error: ' + message;
            errorEl.classList.remove('hidden');
        }

        function render(tasks) {
            rows.innerHTML = '';
            if (tasks.length === 0) {
                statusEl.textContent = 'No tasks due today';
                statusEl.classList.remove('hidden');
                listEl.classList.add('hidden');
                return;
            }
            statusEl.classList.add('hidden');
            listEl.classList.remove('hidden');
            tasks.forEach(function (task) {
                var tr = document.createElement('tr');
                tr.innerHTML =
                    '<td>' + escapeHtml(task.type) + '</td>' +
                    '<td class="mono">' + escapeHtml(task.application_id) + '</td>' +
                    '<td>' + escapeHtml(new Date(task.due_at).toISOString().slice(11, 16)) + '</td>' +
                    '<td>' + escapeHtml(task.status) + '</td>' +
                    '<td><button class="btn primary">Mark Complete</button></td>';
                tr.querySelector('button').addEventListener('click', function () {
                    markComplete(task.id, tr);
                });
                rows.appendChild(tr);
            });
        }

        function fetchTasks() {
            fetch('/api/v1/tasks/today', { headers: taskdeskHeaders() })
                .then(function (res) {
                    return res.json().then(function (data) {
                        if (!res.ok) throw new Error(data.error || 'Failed to load tasks');
                        return data;
                    });
                })
                .then(function (data) { render(data.tasks); })
                .catch(function (err) {
                    statusEl.classList.add('hidden');
                    showError(err.message);
                });
        }

        function markComplete(id, tr) {
            fetch('/api/v1/tasks/' + encodeURIComponent(id) + '/complete', {
                method: 'POST',
                headers: taskdeskHeaders()
            })
                .then(function (res) {
                    if (!res.ok) throw new Error('Failed to mark task as complete');
                    tr.remove();
                    if (!rows.children.length) render([]);
                })
                .catch(function (err) { showError(err.message); });
        }

        fetchTasks();"""


def render_today_page(app_name: str) -> str:
    """Return HTML for the today dashboard (data loaded client-side from the JSON API)."""
    return render_page(f"Today - {app_name}", _BODY, _SCRIPT)
