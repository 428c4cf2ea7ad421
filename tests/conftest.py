"""Pytest fixtures for fastatools tests"""

import logging
import shutil
import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create temporary directory for test outputs"""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir)


@pytest.fixture
def temp_fasta(temp_dir):
    """Generate temporary FASTA file with test sequences"""
    def _generate_fasta(num_sequences: int = 10, seq_length: int = 120,
                        name: str = "test_sequences.fa"):
        fasta_file = temp_dir / name

        import random
        random.seed(42)

        bases = ['A', 'T', 'G', 'C']
        with open(fasta_file, 'w') as f:
            for i in range(num_sequences):
                seq = ''.join(random.choice(bases) for _ in range(seq_length))
                f.write(f">test_seq_{i} sample {i}\n")
                # 60-column input so output re-wrapping is exercised
                for j in range(0, seq_length, 60):
                    f.write(f"{seq[j:j + 60]}\n")

        return fasta_file

    return _generate_fasta


@pytest.fixture
def ten_record_fasta(temp_dir):
    """Ten 4bp records s0..s9, one line each"""
    sequences = ['AAAA', 'CCCC', 'GGGG', 'TTTT', 'ACGT',
                 'TGCA', 'AACC', 'GGTT', 'CAGT', 'GTCA']
    fasta_file = temp_dir / "ten.fa"
    fasta_file.write_text(
        ''.join(f">s{i}\n{seq}\n" for i, seq in enumerate(sequences))
    )
    return fasta_file


@pytest.fixture
def bed_fasta(temp_dir):
    """Mix of BED-style and plain headers"""
    fasta_file = temp_dir / "regions.fa"
    fasta_file.write_text(
        ">chr1:1000-2000 exon 1\n"
        "ACGTACGTAC\n"
        "ACGTACGTAC\n"
        ">seq1 description\n"
        "AAAAACCCCC\n"
        ">chrX:5-25\n"
        "GGGGGTTTTT\n"
    )
    return fasta_file


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging so streams from one
    CliRunner invocation are not reused by the next test."""
    yield
    logger = logging.getLogger('fastatools')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
