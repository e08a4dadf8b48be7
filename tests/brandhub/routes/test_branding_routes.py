import os

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from brandhub.models.branding import Branding
from brandhub.repositories import branding as branding_repository


def _create(client, name='Acme', category='food', filename='logo.png'):
    return client.post(
        '/branding',
        data={'name': name, 'category': category},
        files={'image': (filename, b'\x89PNG-bytes', 'image/png')},
    )


def test_create_branding_stores_image_path(client, upload_dir) -> None:
    response = _create(client)

    assert response.status_code == 200
    body = response.json()
    assert body['message'] == 'Image uploaded and branding created'
    assert body['data']['name'] == 'Acme'
    assert body['data']['category'] == 'food'
    image_path = body['data']['image']
    assert image_path.startswith(str(upload_dir))
    assert image_path.endswith('-logo.png')
    with open(image_path, 'rb') as stored:
        assert stored.read() == b'\x89PNG-bytes'


def test_create_branding_without_file_returns_400(client) -> None:
    response = client.post('/branding', data={'name': 'Acme', 'category': 'food'})

    assert response.status_code == 400
    assert response.json() == {'message': 'No file uploaded'}


def test_list_brandings(client) -> None:
    _create(client, name='Acme')
    _create(client, name='Globex')

    response = client.get('/branding')

    assert response.status_code == 200
    body = response.json()
    assert body['message'] == 'List Data Branding'
    assert [branding['name'] for branding in body['data']] == ['Acme', 'Globex']


def test_branding_detail_is_wrapped_in_list(client) -> None:
    created = _create(client).json()['data']

    response = client.get(f"/branding/{created['id']}")

    assert response.status_code == 200
    assert response.json() == {'data': [created], 'message': 'List Data Branding'}


def test_branding_detail_missing_returns_404(client) -> None:
    response = client.get('/branding/999')

    assert response.status_code == 404
    assert response.json() == {'message': 'Branding not found'}


def test_update_branding_keeps_omitted_fields(client) -> None:
    created = _create(client).json()['data']

    response = client.put(f"/branding/{created['id']}", data={'name': 'Acme Corp'})

    assert response.status_code == 200
    assert response.json() == {
        'data': {**created, 'name': 'Acme Corp'},
        'message': 'Branding updated',
    }


def test_update_branding_replaces_image(client) -> None:
    created = _create(client).json()['data']

    response = client.put(
        f"/branding/{created['id']}",
        data={'category': 'drinks'},
        files={'image': ('new.png', b'new-bytes', 'image/png')},
    )

    data = response.json()['data']
    assert data['name'] == 'Acme'
    assert data['category'] == 'drinks'
    assert data['image'] != created['image']
    assert data['image'].endswith('-new.png')


def test_update_missing_branding_returns_404(client) -> None:
    response = client.put('/branding/999', data={'name': 'X'})

    assert response.status_code == 404
    assert response.json() == {'message': 'Branding not found'}


def test_delete_branding_leaves_image_on_disk(client) -> None:
    created = _create(client).json()['data']

    response = client.delete(f"/branding/{created['id']}")

    assert response.status_code == 200
    assert response.json() == {'message': f"Branding {created['id']} deleted"}
    assert client.get(f"/branding/{created['id']}").status_code == 404
    assert os.path.exists(created['image'])


def test_delete_missing_branding_returns_404(client) -> None:
    assert client.delete('/branding/999').status_code == 404


def _store_failure(*args, **kwargs):
    raise OperationalError('UPDATE branding', {}, Exception('database is locked'))


@pytest.fixture
def rollbacks(monkeypatch: pytest.MonkeyPatch) -> list:
    calls = []
    original_rollback = Session.rollback

    def recording_rollback(self):
        calls.append(self)
        return original_rollback(self)

    monkeypatch.setattr(Session, 'rollback', recording_rollback)
    return calls


def test_create_branding_store_failure_returns_500(client, rollbacks, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(branding_repository, 'create_branding', _store_failure)

    response = _create(client)

    assert response.status_code == 500
    assert response.json() == {'message': 'Internal server error'}
    assert rollbacks
    assert client.get('/branding').json()['data'] == []


def test_create_branding_write_failure_returns_500(client, rollbacks, monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_save(upload):
        raise OSError('disk full')

    monkeypatch.setattr('brandhub.routes.branding_routes.save_upload', failing_save)

    response = _create(client)

    assert response.status_code == 500
    assert response.json() == {'message': 'Internal server error'}
    assert rollbacks


def test_update_branding_store_failure_keeps_record(
    client, session_factory, rollbacks, monkeypatch: pytest.MonkeyPatch
) -> None:
    created = _create(client).json()['data']
    monkeypatch.setattr(branding_repository, 'update_branding', _store_failure)

    response = client.put(f"/branding/{created['id']}", data={'name': 'Acme Corp'})

    assert response.status_code == 500
    assert response.json() == {'message': 'Internal server error'}
    assert rollbacks
    db = session_factory()
    try:
        stored = db.get(Branding, created['id'])
    finally:
        db.close()
    assert stored.name == 'Acme'


def test_branding_detail_store_failure_returns_500(client, rollbacks, monkeypatch: pytest.MonkeyPatch) -> None:
    created = _create(client).json()['data']
    monkeypatch.setattr(branding_repository, 'get_branding', _store_failure)

    response = client.get(f"/branding/{created['id']}")

    assert response.status_code == 500
    assert response.json() == {'message': 'Internal server error'}
    assert rollbacks
