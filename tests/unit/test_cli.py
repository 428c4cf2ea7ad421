"""CLI tests for the subsample, to-json and utils commands.

Sequence data is checked on result.stdout; log messages go to stderr.
"""

import json

import pytest
import yaml
from click.testing import CliRunner

from fastatools.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


def headers(text):
    return [line for line in text.splitlines() if line.startswith('>')]


class TestSubsampleCommand:

    def test_default_seed_sample_on_stdout(self, runner, ten_record_fasta):
        result = runner.invoke(cli, ['-q', 'subsample', str(ten_record_fasta), '4'])

        assert result.exit_code == 0, result.output
        assert headers(result.stdout) == [">s0", ">s5", ">s8", ">s1"]

    def test_single_dash_options(self, runner, ten_record_fasta, temp_dir):
        rest = temp_dir / "rest.fa"

        result = runner.invoke(cli, [
            '-q', 'subsample', str(ten_record_fasta), '4',
            '-seed', '1', '-rest', str(rest)
        ])

        assert result.exit_code == 0, result.output
        assert headers(result.stdout) == [">s0", ">s5", ">s8", ">s1"]
        assert headers(rest.read_text()) == [">s7", ">s3", ">s6", ">s9", ">s4", ">s2"]

    def test_seed_changes_sample(self, runner, ten_record_fasta):
        result = runner.invoke(cli, ['-q', 'subsample', str(ten_record_fasta), '4', '--seed', '7'])

        assert result.exit_code == 0, result.output
        assert headers(result.stdout) == [">s2", ">s7", ">s4", ">s3"]

    def test_norand_ignores_seed(self, runner, ten_record_fasta):
        outputs = []
        for seed in ('1', '99'):
            result = runner.invoke(cli, [
                '-q', 'subsample', str(ten_record_fasta), '3', '-norand', '-seed', seed
            ])
            assert result.exit_code == 0, result.output
            outputs.append(result.stdout)

        assert outputs[0] == outputs[1]
        assert headers(outputs[0]) == [">s0", ">s1", ">s2"]

    def test_bed_window(self, runner, temp_dir):
        fasta_file = temp_dir / "bed.fa"
        fasta_file.write_text(">chr1:1000-2000\n" + "ACGT" * 250 + "\n")

        result = runner.invoke(cli, [
            '-q', 'subsample', str(fasta_file), '1', '-off', '101', '-len', '50'
        ])

        assert result.exit_code == 0, result.output
        lines = result.stdout.splitlines()
        assert lines[0] == ">chr1:1100-1150"
        assert lines[1] == ("ACGT" * 250)[100:150]
        assert len(lines) == 2

    def test_output_file_option(self, runner, bed_fasta, temp_dir):
        output = temp_dir / "sample.fa"

        result = runner.invoke(cli, [
            '-q', 'subsample', str(bed_fasta), '3', '--norand',
            '--off', '3', '--len', '4', '-o', str(output)
        ])

        assert result.exit_code == 0, result.output
        assert output.read_text() == (
            ">chr1:1002-1006 exon 1\nGTAC\n"
            ">seq1 description\nAAAC\n"
            ">chrX:7-11\nGGGT\n"
        )

    def test_not_enough_sequences_warns(self, runner, bed_fasta, temp_dir):
        rest = temp_dir / "rest.fa"

        result = runner.invoke(cli, [
            '-q', 'subsample', str(bed_fasta), '10', '-rest', str(rest)
        ])

        assert result.exit_code == 0, result.output
        assert "not enough sequences (3); 10 requested." in result.stderr
        assert len(headers(result.stdout)) == 3
        assert rest.read_text() == ""

    def test_missing_fasta_is_usage_error(self, runner, temp_dir):
        result = runner.invoke(cli, ['subsample', str(temp_dir / "absent.fa"), '3'])

        assert result.exit_code == 2
        assert "does not exist" in result.output
        assert result.stdout == ""

    def test_non_integer_count_is_usage_error(self, runner, ten_record_fasta):
        result = runner.invoke(cli, ['subsample', str(ten_record_fasta), 'three'])

        assert result.exit_code == 2
        assert "three" in result.output

    def test_negative_count_rejected(self, runner, ten_record_fasta):
        result = runner.invoke(cli, ['subsample', str(ten_record_fasta), '--', '-1'])

        assert result.exit_code == 2

    def test_missing_arguments(self, runner):
        result = runner.invoke(cli, ['subsample'])

        assert result.exit_code == 2
        assert "Usage" in result.output

    def test_offset_must_be_positive(self, runner, ten_record_fasta):
        result = runner.invoke(cli, ['subsample', str(ten_record_fasta), '1', '-off', '0'])

        assert result.exit_code == 2

    def test_unwritable_rest_is_fatal(self, runner, ten_record_fasta, temp_dir):
        rest = temp_dir / "no_such_dir" / "rest.fa"

        result = runner.invoke(cli, [
            'subsample', str(ten_record_fasta), '4', '-rest', str(rest)
        ])

        assert result.exit_code == 1
        assert "Can't open file" in result.stderr
        assert result.stdout == ""

    def test_help_aliases(self, runner):
        for flag in ('-help', '--help', '-h'):
            result = runner.invoke(cli, ['subsample', flag])
            assert result.exit_code == 0
            assert "subsample of N sequences" in result.stdout

    def test_config_seed_used_when_no_flag(self, runner, ten_record_fasta, temp_dir):
        config_file = temp_dir / "config.yaml"
        config_file.write_text(yaml.dump({'sampling': {'seed': 7}, 'output': {'progress': False}}))

        result = runner.invoke(cli, [
            '-q', '--config', str(config_file), 'subsample', str(ten_record_fasta), '4'
        ])

        assert result.exit_code == 0, result.output
        assert headers(result.stdout) == [">s2", ">s7", ">s4", ">s3"]

    def test_config_line_width(self, runner, temp_fasta, temp_dir):
        fasta_file = temp_fasta(num_sequences=1, seq_length=120)
        config_file = temp_dir / "config.yaml"
        config_file.write_text(yaml.dump({'output': {'line_width': 60}}))

        result = runner.invoke(cli, [
            '-q', '-c', str(config_file), 'subsample', str(fasta_file), '1', '--no-progress'
        ])

        assert result.exit_code == 0, result.output
        assert [len(line) for line in result.stdout.splitlines()[1:]] == [60, 60]

    def test_invalid_generator_in_config(self, runner, ten_record_fasta, temp_dir):
        config_file = temp_dir / "config.yaml"
        config_file.write_text(yaml.dump({'sampling': {'generator': 'bogus'}}))

        result = runner.invoke(cli, [
            '-c', str(config_file), 'subsample', str(ten_record_fasta), '1'
        ])

        assert result.exit_code == 1
        assert "Unknown random generator" in result.stderr

    def test_seed_flag_overrides_config(self, runner, ten_record_fasta, temp_dir):
        config_file = temp_dir / "config.yaml"
        config_file.write_text(yaml.dump({'sampling': {'seed': 7}}))

        result = runner.invoke(cli, [
            '-q', '-c', str(config_file), 'subsample', str(ten_record_fasta), '4', '-seed', '1'
        ])

        assert result.exit_code == 0, result.output
        assert headers(result.stdout) == [">s0", ">s5", ">s8", ">s1"]

    def test_wrong_type_in_config(self, runner, ten_record_fasta, temp_dir):
        config_file = temp_dir / "config.yaml"
        config_file.write_text(yaml.dump({'output': {'line_width': 'wide'}}))

        result = runner.invoke(cli, [
            '-c', str(config_file), 'subsample', str(ten_record_fasta), '1'
        ])

        assert result.exit_code == 1
        assert "Invalid settings" in result.stderr
        assert result.stdout == ""

    def test_non_utf8_header_bytes_preserved(self, runner, temp_dir):
        fasta_file = temp_dir / "latin1.fa"
        fasta_file.write_bytes(b">a caf\xe9\nACGT\n>b na\xefve\nGGCC\n")
        rest = temp_dir / "rest.fa"

        result = runner.invoke(cli, [
            '-q', 'subsample', str(fasta_file), '1', '-norand', '-rest', str(rest)
        ])

        assert result.exit_code == 0, result.output
        assert result.stdout_bytes == b">a caf\xe9\nACGT\n"
        assert rest.read_bytes() == b">b na\xefve\nGGCC\n"

    def test_log_file_written(self, runner, ten_record_fasta, temp_dir):
        log_file = temp_dir / "run.log"

        result = runner.invoke(cli, [
            '-l', str(log_file), 'subsample', str(ten_record_fasta), '2', '--no-progress'
        ])

        assert result.exit_code == 0, result.output
        assert "Selected 2 of 10 records" in log_file.read_text()


class TestToJsonCommand:

    def test_fasta_option(self, runner, bed_fasta):
        result = runner.invoke(cli, ['-q', 'to-json', '--fasta', str(bed_fasta)])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert list(data) == ["chr1:1000-2000 exon 1", "seq1 description", "chrX:5-25"]
        assert data["seq1 description"] == list("AAAAACCCCC")

    def test_reads_stdin(self, runner):
        result = runner.invoke(cli, ['-q', 'to-json'], input=">a\nAC\n")

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout) == {"a": ["A", "C"]}

    def test_no_quote(self, runner):
        result = runner.invoke(cli, ['-q', 'to-json', '--no-quote'], input=">a\nAC\n")

        assert result.exit_code == 0, result.output
        assert result.stdout == '{\n"a" : [A,C]\n}\n'

    def test_output_file(self, runner, bed_fasta, temp_dir):
        output = temp_dir / "out.json"

        result = runner.invoke(cli, ['-q', 'to-json', '-f', str(bed_fasta), '-o', str(output)])

        assert result.exit_code == 0, result.output
        assert len(json.loads(output.read_text())) == 3


class TestUtilsCommand:

    def test_generate_config(self, runner, temp_dir):
        output = temp_dir / "generated.yaml"

        result = runner.invoke(cli, ['utils', 'generate-config', '-o', str(output)])

        assert result.exit_code == 0, result.output
        saved = yaml.safe_load(output.read_text())
        assert saved['sampling']['seed'] == 1
        assert saved['output']['line_width'] == 50


class TestGlobalOptions:

    def test_version(self, runner):
        result = runner.invoke(cli, ['--version'])

        assert result.exit_code == 0
        assert "fastatools" in result.stdout

    def test_missing_config_file(self, runner, temp_dir):
        result = runner.invoke(cli, ['-c', str(temp_dir / "absent.yaml"), 'utils'])

        assert result.exit_code == 2
