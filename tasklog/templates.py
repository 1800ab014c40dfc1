# ------------------------ HTML Shell ------------------------
# Templates live in a DictLoader so the app ships as a single package with no
# templates folder. Names end in .html, which keeps Jinja autoescaping on.

from flask import render_template
from jinja2 import DictLoader

APP_NAME = "Tasklog"

BASE = """
<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>{% block title %}{{ app_name }}{% endblock %}</title>
    <script src="https://cdn.tailwindcss.com"></script>
  </head>
  <body class="min-h-screen bg-gradient-to-b from-slate-50 to-slate-100">
    <header class="sticky top-0 backdrop-blur bg-white/70 border-b border-slate-200 z-10">
      <div class="max-w-4xl mx-auto px-4 py-4 flex items-center justify-between">
        <a href="/" class="text-xl font-extrabold tracking-tight">{{ app_name }}</a>
      </div>
    </header>

    <main class="max-w-4xl mx-auto px-4 py-8">
      {% block content %}{% endblock %}
    </main>
  </body>
</html>
"""

LOGIN = """{% extends 'base.html' %}
{% block title %}Log in • {{ app_name }}{% endblock %}
{% block content %}
<div class='max-w-md mx-auto'>
  <h1 class='text-3xl font-bold mb-6'>Log in</h1>
  <form method='post' action='/' class='space-y-4 bg-white p-6 rounded-2xl shadow'>
    <div>
      <label class='block text-sm font-medium mb-1'>Password</label>
      <input type='password' name='password' class='w-full rounded-xl border border-slate-300 px-3 py-2' autofocus />
    </div>
    <button class='w-full rounded-xl bg-slate-900 text-white py-2 font-semibold hover:bg-slate-800'>Log in</button>
  </form>
</div>
{% endblock %}
"""

TASKS = """{% extends 'base.html' %}
{% block title %}Tasks • {{ app_name }}{% endblock %}
{% block content %}
<h1 class='text-3xl font-extrabold mb-6'>Your tasks</h1>

<form method='post' action='/tasks' class='mb-6 bg-white p-4 rounded-2xl shadow flex items-center gap-3'>
  <input name='name' class='flex-1 rounded-xl border border-slate-300 px-3 py-2' placeholder='New task' />
  <button class='rounded-xl bg-slate-900 text-white px-4 py-2 font-semibold hover:bg-slate-800'>Add</button>
</form>

<ul class='space-y-2'>
  {% for task in tasks %}
  <li class='flex items-center justify-between p-3 bg-white rounded-xl border border-slate-200'>
    <a href='/tasks/{{ task.id }}' class='text-slate-800'>{{ task.name }}</a>
    <form method='post' action='/tasks/del/{{ task.id }}'>
      <button class='px-2 py-1 text-xs rounded-lg border border-red-300 text-red-700'>Delete</button>
    </form>
  </li>
  {% else %}
  <li class='text-slate-500'>No tasks yet. Add your first one!</li>
  {% endfor %}
</ul>
{% endblock %}
"""

TASK = """{% extends 'base.html' %}
{% block title %}{{ task or 'Unknown task' }} • {{ app_name }}{% endblock %}
{% block content %}
<a href='/' class='text-sm underline'>&larr; All tasks</a>
{% if task is none %}
<h1 class='text-3xl font-extrabold my-6'>Unknown task</h1>
{% else %}
<h1 class='text-3xl font-extrabold my-6'>{{ task }}</h1>

<form method='post' action='{{ request.path }}/add-entry' class='mb-6 bg-white p-4 rounded-2xl shadow flex items-center gap-3'>
  <input name='description' class='flex-1 rounded-xl border border-slate-300 px-3 py-2' placeholder='What happened?' />
  <button class='rounded-xl bg-slate-900 text-white px-4 py-2 font-semibold hover:bg-slate-800'>Log</button>
</form>

<ul class='space-y-2'>
  {% for entry in entries %}
  <li class='flex items-center justify-between p-3 bg-white rounded-xl border border-slate-200'>
    <div>
      <span class='text-slate-500 text-sm mr-3'>{{ entry.created_at }}</span>
      <span class='text-slate-800'>{{ entry.description }}</span>
    </div>
    <a class='px-2 py-1 text-xs rounded-lg border border-red-300 text-red-700' href='/tasks/del-entry/{{ entry.id }}'>Delete</a>
  </li>
  {% else %}
  <li class='text-slate-500'>No entries yet.</li>
  {% endfor %}
</ul>
{% endif %}
{% endblock %}
"""

LOADER = DictLoader({
    "base.html": BASE,
    "login.html": LOGIN,
    "tasks.html": TASKS,
    "task.html": TASK,
})


def render(name, data=None):
    """Render the ``name`` page (``login``, ``tasks`` or ``task``) to UTF-8 bytes."""
    return render_template(f"{name}.html", app_name=APP_NAME, **(data or {})).encode("utf-8")
