"""Tests for the command-line entry point."""

import json

import main


def _args(tmp_path, *extra):
    return list(extra) + [
        '--config', str(tmp_path / "absent.yaml"),
        '--tasks', str(tmp_path / "tasks.json"),
    ]


class TestMain:
    """Test CLI commands end to end."""

    def test_demo(self, tmp_path, capsys):
        assert main.main(_args(tmp_path, 'demo')) == 0
        out = capsys.readouterr().out
        assert "Execution order" in out
        assert "Urgent bug fix" in out
        assert "Task Statistics" in out

    def test_generate_then_order(self, tmp_path, capsys):
        assert main.main(_args(tmp_path, 'generate-tasks')) == 0
        data = json.loads((tmp_path / "tasks.json").read_text())
        assert len(data) == 20

        assert main.main(_args(tmp_path, 'order')) == 0
        assert "Execution order" in capsys.readouterr().out

    def test_complete_saves_status(self, tmp_path):
        assert main.main(_args(tmp_path, 'complete', 'TASK-001')) == 0
        data = json.loads((tmp_path / "tasks.json").read_text())
        statuses = {entry['task_id']: entry['status'] for entry in data}
        assert statuses['TASK-001'] == "completed"

    def test_unknown_task_returns_error(self, tmp_path, capsys):
        assert main.main(_args(tmp_path, 'start', 'TASK-999')) == 1
        assert "Task not found: TASK-999" in capsys.readouterr().err

    def test_cycle_in_file_returns_error(self, tmp_path, capsys):
        entries = [
            {'task_id': 'A', 'title': 'a', 'priority': 1,
             'deadline': '2030-01-01T00:00:00', 'dependencies': ['B']},
            {'task_id': 'B', 'title': 'b', 'priority': 1,
             'deadline': '2030-01-01T00:00:00', 'dependencies': ['A']},
        ]
        (tmp_path / "tasks.json").write_text(json.dumps(entries))
        assert main.main(_args(tmp_path, 'stats')) == 1
        assert "Circular dependency" in capsys.readouterr().err

    def test_missing_field_returns_error(self, tmp_path, capsys):
        entries = [{'task_id': 'A', 'priority': 1, 'deadline': '2030-01-01T00:00:00'}]
        (tmp_path / "tasks.json").write_text(json.dumps(entries))
        assert main.main(_args(tmp_path, 'order')) == 1
        assert "missing field 'title'" in capsys.readouterr().err

    def test_malformed_json_returns_error(self, tmp_path, capsys):
        (tmp_path / "tasks.json").write_text("[{not json")
        assert main.main(_args(tmp_path, 'recommend')) == 1
        assert "Error: invalid input" in capsys.readouterr().err

    def test_malformed_config_returns_error(self, tmp_path, capsys):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("scoring: [unclosed\n")
        argv = ['stats', '--config', str(config_path), '--tasks', str(tmp_path / "tasks.json")]
        assert main.main(argv) == 1
        assert "invalid config file" in capsys.readouterr().err

    def test_listed_scores_use_configured_weights(self, tmp_path, capsys):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("scoring:\n  priority_weight: 100\n")
        entries = [{'task_id': 'A', 'title': 'a', 'priority': 'URGENT',
                    'deadline': '2099-01-01T00:00:00'}]
        tasks_path = tmp_path / "tasks.json"
        tasks_path.write_text(json.dumps(entries))
        argv = ['recommend', '--config', str(config_path), '--tasks', str(tasks_path)]
        assert main.main(argv) == 0
        assert "Urgency score: 400.00" in capsys.readouterr().out
