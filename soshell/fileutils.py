"""File size comparison, permission changes and directory listings."""

import os
import stat
import time


def larger_file(file1, file2):
    """Describe the larger of two files; ties go to ``file1``."""
    size1 = os.stat(file1).st_size
    size2 = os.stat(file2).st_size
    name, size = (file1, size1) if size1 >= size2 else (file2, size2)
    return f"Maior ficheiro: {name} ({size / 1024.0:.2f} KB)"


def set_owner_exec(path):
    """Grant execute permission to the owner of ``path``."""
    mode = os.stat(path).st_mode
    os.chmod(path, stat.S_IMODE(mode | stat.S_IXUSR))
    return f"Permissão de execução atribuída ao dono de {path}"


def remove_group_other_read(path):
    """Remove read permission for group and others from ``path``."""
    mode = os.stat(path).st_mode
    os.chmod(path, stat.S_IMODE(mode & ~(stat.S_IRGRP | stat.S_IROTH)))
    return f"Permissões de leitura removidas para grupo e outros em {path}"


def list_directory(directory=None):
    """List the entries of ``directory`` with inode, size and modification time."""
    if directory is None:
        directory = "."
    lines = [f"{'Nome':<25} {'Inode':<10} {'Tamanho':<11} Última modificação"]
    with os.scandir(directory) as entries:
        for entry in entries:
            try:
                info = os.stat(os.path.join(directory, entry.name))
            except OSError:
                continue
            modified = time.ctime(info.st_mtime)
            lines.append(
                f"{entry.name:<25} {info.st_ino:<10} {info.st_size:<11} {modified}"
            )
    return "\n".join(lines) + "\n"