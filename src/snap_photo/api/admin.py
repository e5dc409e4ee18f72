"""Admin review page served next to the API."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/ui", response_class=HTMLResponse)
async def admin_ui() -> HTMLResponse:
    """Minimal review page that consumes the photo and feedback API."""
    return HTMLResponse(_ADMIN_UI_HTML)


_ADMIN_UI_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Snap Photo Admin</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      h1 { margin-bottom: 0.5rem; }
      .grid { display: grid; grid-template-columns: repeat(auto-fill, 160px); gap: 1rem; }
      .grid img { width: 160px; height: 160px; object-fit: cover; border-radius: 8px; }
      .error { color: #b91c1c; margin-bottom: 1rem; }
      button { padding: 0.3rem 0.7rem; margin-top: 0.3rem; }
      li { margin-bottom: 0.6rem; }
    </style>
  </head>
  <body>
    <h1>Snap Photo Admin</h1>
    <div id="error" class="error"></div>
    <h2>Photos (<span id="photo-count">0</span>)</h2>
    <div id="photos" class="grid"></div>
    <h2>Feedback</h2>
    <ul id="feedbacks"></ul>
    <script>
      function showError(text) {
        const el = document.getElementById('error');
        el.textContent = text;
        setTimeout(() => { el.textContent = ''; }, 3000);
      }

      async function loadPhotos() {
        const res = await fetch('/api/photos');
        if (!res.ok) { showError('Failed to load photos'); return; }
        const photos = await res.json();
        document.getElementById('photo-count').textContent = photos.length;
        const grid = document.getElementById('photos');
        grid.innerHTML = '';
        for (const photo of photos) {
          const cell = document.createElement('div');
          const img = document.createElement('img');
          img.src = photo.imageUrl;
          img.alt = 'Photo ' + photo.id;
          const del = document.createElement('button');
          del.textContent = 'Delete';
          del.onclick = () => deletePhoto(photo.id);
          cell.append(img, document.createElement('br'), del);
          grid.append(cell);
        }
      }

      async function loadFeedbacks() {
        const res = await fetch('/api/feedbacks');
        if (!res.ok) { showError('Failed to load feedbacks'); return; }
        const feedbacks = await res.json();
        const list = document.getElementById('feedbacks');
        list.innerHTML = '';
        for (const fb of feedbacks) {
          const item = document.createElement('li');
          item.textContent = fb.name + ': ' + fb.content + ' [' + fb.status + '] ';
          const mark = document.createElement('button');
          mark.textContent = fb.status === 'reviewed' ? 'Reviewed' : 'Mark reviewed';
          mark.disabled = fb.status === 'reviewed';
          mark.onclick = () => markReviewed(fb.id);
          item.append(mark);
          list.append(item);
        }
      }

      async function markReviewed(id) {
        const res = await fetch('/api/feedbacks/' + id, {
          method: 'PATCH',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify({ status: 'reviewed' })
        });
        if (!res.ok) { showError('Failed to update feedback'); return; }
        await loadFeedbacks();
      }

      async function deletePhoto(id) {
        const res = await fetch('/api/photos/' + id, { method: 'DELETE' });
        if (!res.ok) { showError('Failed to delete photo'); return; }
        await loadPhotos();
      }

      loadPhotos();
      loadFeedbacks();
    </script>
  </body>
</html>
"""
