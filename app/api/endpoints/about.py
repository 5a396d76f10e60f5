from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter()

ABOUT_HTML = """<html>
<head>
<title>Party Planner API</title>
<link href="https://cdn.jsdelivr.net/npm/bootstrap@4.6.2/dist/css/bootstrap.min.css" rel="stylesheet">
</head>
<body>
<div class="container-fluid">
<h1>Party Planner API</h1>
<p>A dummy API for booking parties of different types. Nothing is stored: submissions are
validated against the party type's spec and either accepted (with a booking id) or rejected.</p>

<h2>Routes</h2>

<h3><span class="badge badge-success">GET</span> <code>/partytypes</code></h3>
<p>List of the party types you can book. Names are case-sensitive.</p>
<pre><code>["MovieParty","PoolParty","DinnerParty"]</code></pre>

<h3><span class="badge badge-success">GET</span> <code>/partytype/{type name}</code></h3>
<p>Spec of one party type: one key per JSON field with</p>
<ul>
<li><code>type</code>: <code>string</code>, <code>int</code> or <code>RFC 3339</code> (e.g. <code>"2020-03-19T06:48:34+00:00"</code>)</li>
<li><code>required</code>: the field must be present and non-empty</li>
<li><code>list</code>: the field is a list of <code>type</code></li>
<li><code>checks</code>: extra validation, or <code>null</code>:
  <ul>
  <li><code>gt=N</code>: integers must be greater than N, lists must have more than N items</li>
  <li><code>gtfield=other</code>: must be greater than the field <code>other</code></li>
  <li><code>oneof=a b c</code>: space-separated, case-sensitive list of accepted values</li>
  </ul>
</li>
</ul>
<p>Unknown type names return <code>404</code>.</p>

<h3><span class="badge badge-info">POST</span> <code>/bookparty</code></h3>
<p>Body: <code>{"party_type": "MovieParty", "data": {...}}</code>. Returns <code>{"booking_id": "..."}</code>.
Errors return <code>400</code> with <code>{"code", "message", "details"}</code> where <code>code</code> is one of
<code>unknown_type</code>, <code>malformed_payload</code> (wrong shape or unknown field) or
<code>validation_failed</code> (a check failed).</p>

<h3><span class="badge badge-info">POST</span> <code>/bookpartyprod</code></h3>
<p>Same as <code>/bookparty</code>, except a fraction of requests fail with a <code>500</code>
(<code>transient_failure</code>), just like production. Retrying is up to you.</p>
</div>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def about() -> str:
    return ABOUT_HTML
