"""
Tests for the headless runner.
"""
import json
import pytest
from conftest import make_spec

import headless


@pytest.fixture
def template_file(tmp_path):
    path = tmp_path / "template.json"
    path.write_text(json.dumps({
        'name': 'Header',
        'components': [make_spec(0, 0, 100, 50), make_spec(50, 25, 100, 50, fontSize='20px')],
    }), encoding='utf-8')
    return path


class TestLoadTemplate:

    def test_object_payload(self, template_file):
        specs, name = headless.load_template(str(template_file))
        assert len(specs) == 2
        assert name == 'Header'

    def test_list_payload(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text(json.dumps([make_spec(0, 0, 10, 10)]), encoding='utf-8')
        specs, name = headless.load_template(str(path))
        assert len(specs) == 1
        assert name is None

    def test_bad_payload(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({'shapes': []}), encoding='utf-8')
        with pytest.raises(ValueError):
            headless.load_template(str(path))


class TestRun:

    def test_resize(self):
        snapshot = headless.run([make_spec(0, 0, 100, 50), make_spec(50, 25, 100, 50)],
                                resize=(300, 150))
        b = snapshot['components'][1]
        assert (b['x'], b['y'], b['width'], b['height']) == (100, 50, 200, 100)
        assert snapshot['groups'][0]['width'] == 300
        assert snapshot['results'] == [('resize_group', 'ok')]
        assert snapshot['selection']['selectedGroupId'] == snapshot['groups'][0]['id']

    def test_free_marquee(self):
        snapshot = headless.run([make_spec(0, 0, 10, 10), make_spec(100, 0, 10, 10)],
                                free=True, move=(5, 5), marquee=(-5, -5, 20, 20))
        first = snapshot['components'][0]
        assert snapshot['groups'] == []
        assert (first['x'], first['y']) == (0, 0)
        assert snapshot['selection']['selectedComponentIds'] == [first['id']]

    def test_place_creates_free_components(self):
        snapshot = headless.run([make_spec(0, 0, 100, 50)], place=[('rectangle', '200', '100')],
                                marquee=(150, 70, 300, 300))
        placed = snapshot['components'][1]
        assert placed['type'] == 'rectangle'
        assert (placed['x'], placed['y'], placed['width'], placed['height']) == (140, 60, 120, 80)
        assert 'groupId' not in placed
        assert snapshot['groups'][0]['componentIds'] == [snapshot['components'][0]['id']]
        assert snapshot['results'] == [('place', placed['id']), ('select_in_rect', [placed['id']])]


class TestMain:

    def test_writes_output(self, template_file, tmp_path):
        out = tmp_path / "out.json"
        assert headless.main([str(template_file), '--move', '10', '0', '-o', str(out)]) == 0
        data = json.loads(out.read_text(encoding='utf-8'))
        assert data['groups'][0]['name'] == 'Header'
        assert data['groups'][0]['x'] == 10

    def test_place_option(self, template_file, capsys):
        assert headless.main([str(template_file), '--place', 'circle', '40', '40',
                              '--place', 'text', '500', '300']) == 0
        data = json.loads(capsys.readouterr().out)
        circle, text = data['components'][2:]
        assert (circle['type'], circle['x'], circle['y']) == ('circle', 0, 0)
        assert (text['type'], text['x'], text['y']) == ('text', 450, 288)

    def test_place_unknown_type(self, template_file, capsys):
        assert headless.main([str(template_file), '--place', 'hexagon', '0', '0']) == 1
        assert 'Error' in capsys.readouterr().err

    def test_missing_file(self, tmp_path):
        assert headless.main([str(tmp_path / "missing.json")]) == 1

    def test_invalid_spec(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        bad = make_spec(0, 0, 10, 10)
        bad['states'] = []
        path.write_text(json.dumps([bad]), encoding='utf-8')
        assert headless.main([str(path)]) == 1
        assert 'Error' in capsys.readouterr().err

    def test_prints_json(self, template_file, capsys):
        assert headless.main([str(template_file), '--resize', '300', '150']) == 0
        data = json.loads(capsys.readouterr().out)
        assert len(data['components']) == 2
        assert data['components'][1]['properties']['fontSize'] == '40px'
