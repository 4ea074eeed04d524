#!/usr/bin/env python3
"""
Сценарии урока: последовательности команд от начальной файловой системы
"""

from vterm_mcp.commands import process_command
from vterm_mcp.vfs import create_initial_file_system, is_directory, read_file


def run_session(*lines):
    """Выполняет команды и возвращает вывод каждой из них и итоговую ФС"""
    fs = create_initial_file_system()
    outputs = []
    for line in lines:
        result = process_command(fs, line)
        outputs.append(result.output_lines)
        fs = result.new_file_system
    return outputs, fs


class TestLessonScenarios:
    """Сценарии A-F"""

    def test_pwd_at_start(self):
        outputs, _ = run_session("pwd")
        assert outputs == [["/home/learner"]]

    def test_cd_then_pwd(self):
        outputs, _ = run_session("cd documents", "pwd")
        assert outputs[-1] == ["/home/learner/documents"]

    def test_ls_all_in_home(self):
        outputs, _ = run_session("ls -a")
        entries = outputs[0][0].split()
        assert entries == sorted(entries)
        for name in [".bashrc", ".hidden_secret", "documents/", "projects/", "downloads/"]:
            assert name in entries

    def test_mkdir_twice(self):
        outputs, fs = run_session("mkdir learning", "mkdir learning")
        assert outputs[0] == []
        assert outputs[1] == ["mkdir: cannot create directory 'learning': File exists"]
        assert is_directory(fs, "/home/learner/learning")

    def test_rm_non_empty_directory_without_flag(self):
        outputs, fs = run_session("rm projects")
        assert len(outputs[0]) == 1
        assert "Is a directory (use -r to remove)" in outputs[0][0]
        assert is_directory(fs, "/home/learner/projects")

    def test_cat_seeded_notes(self):
        outputs, fs = run_session("cd documents", "cat notes.txt")
        expected = read_file(fs, "notes.txt").split("\n")[:-1]
        assert outputs[-1] == expected

    def test_clean_up_exercise(self):
        outputs, fs = run_session("touch deleteme.txt", "ls", "rm deleteme.txt", "ls")
        assert "deleteme.txt" in outputs[1][0]
        assert "deleteme.txt" not in outputs[3][0]
        assert read_file(fs, "deleteme.txt") is None
