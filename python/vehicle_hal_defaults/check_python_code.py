#!/usr/bin/env python3

"""
Checks Python code in this repository using various methods (MyPy, importing modules, syntax
checks, pycodestyle, unit tests, doctests). Runs multiple checks in parallel.
"""

import argparse
import concurrent.futures
import fnmatch
import glob
import os
import subprocess
import sys
import time

from typing import Dict, List, Tuple, Union


TOP_LEVEL_MODULE_NAME = 'vehicle_hal_defaults'

REPO_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
PYTHON_DIR = os.path.join(REPO_ROOT, 'python')

MAX_LINE_LENGTH = 100

CHECK_TYPES = [
    'mypy',
    'compile',
    'import',
    'pycodestyle',
    'unittest',
    'doctest',
]


def ensure_decoded(s: Union[str, bytes]) -> str:
    if isinstance(s, bytes):
        return s.decode('utf-8')
    return s


def increment_counter(d: Dict[str, int], key: str) -> None:
    d[key] = d.get(key, 0) + 1


def print_stats(description: str, d: Dict[str, int]) -> None:
    print("%s:\n    %s" % (
        description,
        '\n    '.join('%s: %s' % (k, v) for k, v in sorted(d.items()))
    ))


def rel_to_repo_root(file_path: str) -> str:
    return os.path.relpath(os.path.realpath(file_path), os.path.realpath(REPO_ROOT))


def get_module_name(file_path: str) -> str:
    """
    >>> get_module_name(os.path.join(PYTHON_DIR, 'vehicle_hal_defaults', 'flag_resolver.py'))
    'vehicle_hal_defaults.flag_resolver'
    """
    rel_path = os.path.relpath(os.path.realpath(file_path), os.path.realpath(PYTHON_DIR))
    return '.'.join(os.path.splitext(rel_path)[0].split(os.sep))


class CheckResult:
    def __init__(
            self,
            check_type: str,
            file_path: str,
            cmd_args: List[str] = [],
            stdout: str = '',
            stderr: str = '',
            returncode: int = 0):
        self.check_type = check_type
        self.cmd_args = cmd_args
        self.file_path = file_path
        self.stdout = stdout
        self.stderr = stderr
        self.returncode = returncode

    def get_description(self) -> str:
        return "Check '%s' for %s" % (self.check_type, rel_to_repo_root(self.file_path))


class Reporter:
    def __init__(self, line_width: int):
        self.line_width = line_width

    def get_horizontal_line(self) -> str:
        return '-' * self.line_width + '\n'

    def print_check_result(self, check_result: CheckResult) -> None:
        if check_result.returncode == 0:
            return

        s = self.get_horizontal_line()
        s += check_result.get_description() + '\n'
        s += self.get_horizontal_line()
        s += 'Command: %s\n' % ' '.join(check_result.cmd_args)
        s += 'Exit code: %d\n' % check_result.returncode
        for stream_name, output in (('Standard output', check_result.stdout),
                                    ('Standard error', check_result.stderr)):
            if output.strip():
                s += '\n%s:\n%s' % (stream_name, output)
        sys.stdout.write(s + '\n')


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog=sys.argv[0])
    parser.add_argument('-f', '--file-pattern',
                        default=None,
                        type=str,
                        help='Only analyze files matching this glob-style pattern.')
    return parser.parse_args()


def get_check_cmd(file_path: str, check_type: str) -> List[str]:
    """
    Returns the command to run for the given check, or an empty list if the check does not apply
    to the given file.
    """
    assert check_type in CHECK_TYPES
    is_package_file = rel_to_repo_root(file_path).startswith(
        'python/%s/' % TOP_LEVEL_MODULE_NAME)

    if check_type == 'mypy':
        return ['mypy', '--config-file', os.path.join(REPO_ROOT, 'pyproject.toml'), file_path]
    if check_type == 'compile':
        return [sys.executable, '-m', 'py_compile', file_path]
    if check_type == 'pycodestyle':
        return ['pycodestyle', '--max-line-length=%d' % MAX_LINE_LENGTH, file_path]
    if not is_package_file:
        return []
    if check_type == 'import':
        return [sys.executable, '-c', 'import %s' % get_module_name(file_path)]
    if check_type == 'unittest':
        if not file_path.endswith('_test.py'):
            return []
        return [sys.executable, '-m', 'unittest', get_module_name(file_path)]
    if check_type == 'doctest':
        return [sys.executable, '-m', 'doctest', file_path]
    raise ValueError(f"Unknown check type: {check_type}")


def check_file(file_path: str, check_type: str) -> CheckResult:
    args = get_check_cmd(file_path, check_type)
    if not args:
        return CheckResult(check_type=check_type, file_path=file_path)

    process = subprocess.Popen(
        args, stdout=subprocess.PIPE, stderr=subprocess.PIPE, cwd=PYTHON_DIR)
    stdout, stderr = process.communicate()
    return CheckResult(
        check_type=check_type,
        cmd_args=args,
        file_path=file_path,
        stdout=ensure_decoded(stdout),
        stderr=ensure_decoded(stderr),
        returncode=process.returncode)


def find_input_files(file_pattern: str) -> List[str]:
    input_file_paths = glob.glob(os.path.join(REPO_ROOT, '*.py'))
    for dirpath, dirnames, filenames in os.walk(PYTHON_DIR):
        for file_name in filenames:
            if file_name.endswith('.py'):
                input_file_paths.append(os.path.join(dirpath, file_name))

    if file_pattern:
        effective_file_pattern = '*%s*' % file_pattern
        input_file_paths = [
            file_path for file_path in input_file_paths
            if fnmatch.fnmatch(os.path.basename(file_path), effective_file_pattern)
        ]
    return sorted(input_file_paths)


def check_python_code() -> bool:
    args = parse_args()

    start_time = time.time()
    input_file_paths = find_input_files(args.file_pattern)

    os.environ['MYPYPATH'] = PYTHON_DIR
    os.environ['PYTHONPATH'] = PYTHON_DIR

    reporter = Reporter(line_width=80)
    checks_by_type: Dict[str, int] = {}
    checks_by_result: Dict[str, int] = {}

    success = True

    check_inputs: List[Tuple[str, str]] = [
        (file_path, check_type)
        for file_path in input_file_paths
        for check_type in CHECK_TYPES
    ]

    with concurrent.futures.ThreadPoolExecutor(max_workers=16) as executor:
        future_to_check_input = {
            executor.submit(check_file, file_path, check_type): (file_path, check_type)
            for (file_path, check_type) in check_inputs
        }
        for future in concurrent.futures.as_completed(future_to_check_input):
            file_path, check_type = future_to_check_input[future]
            try:
                check_result = future.result()
            except Exception as exc:
                print("Check '%s' for %s generated an exception: %s" % (check_type, file_path, exc))
                increment_counter(checks_by_result, 'failure')
                success = False
            else:
                if not check_result.cmd_args:
                    continue
                increment_counter(checks_by_type, check_type)
                reporter.print_check_result(check_result)
                if check_result.returncode == 0:
                    increment_counter(checks_by_result, 'success')
                else:
                    increment_counter(checks_by_result, 'failure')
                    success = False

    print_stats("Checks by type", checks_by_type)
    print_stats("Checks by result", checks_by_result)
    print("Elapsed time: %.1f seconds" % (time.time() - start_time))
    print()
    if success:
        print("All checks are successful")
    else:
        print("Some checks failed")
    print()
    return success


if __name__ == '__main__':
    if check_python_code():
        sys.exit(0)
    sys.exit(1)
