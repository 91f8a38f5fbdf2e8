"""The interactive shell: prompt loop and built-in commands."""

import os
import re
import subprocess
import sys

from soshell.alerts import CopyLog, aviso, start_aviso, start_copy
from soshell.bitops import display_bit_ops
from soshell.calc import CalcError, bits, calc
from soshell.execute import execute
from soshell.files import (
    close_fd,
    fd_is_valid,
    file_info,
    format_bytes,
    is_jpeg,
    open_file,
    read_fd,
)
from soshell.fileutils import (
    larger_file,
    list_directory,
    remove_group_other_read,
    set_owner_exec,
)
from soshell.parse import parse
from soshell.socp import DEFAULT_BLKSIZE, socp

DEFAULT_PROMPT = "SOSHELL: Introduza um comando : prompt> "
VERSION_TEXT = "SO Shell 2025 versão 1.0"
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_USHORT = 0xFFFF


def _atoi(text):
    match = _INT_PREFIX.match(text or "")
    return int(match.group(1)) if match else 0


def _arg(args, index):
    return args[index] if len(args) > index else None


class Shell:
    """A small command shell with built-in file, bit and calculator commands."""

    def __init__(self, out=None, err=None, prompt=DEFAULT_PROMPT, copy_log=None):
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.prompt = prompt
        self.copy_log = copy_log if copy_log is not None else CopyLog()
        self._commands = {
            "obterinfo": self._obterinfo,
            "quemsoueu": self._quemsoueu,
            "cd": self._cd,
            "socp": self._socp,
            "calc": self._calc,
            "bits": self._bits,
            "isjpeg": self._isjpeg,
            "isValid": self._is_valid,
            "read": self._read,
            "fileinfo": self._fileinfo,
            "closefd": self._closefd,
            "openfile": self._openfile,
            "displayBitOps": self._display_bit_ops,
            "avisotemp": self._avisotemp,
            "avisorepetido": self._aviso_thread,
            "aviso": self._aviso_thread,
            "socpthread": self._socpthread,
            "InfoCopias": self._info_copias,
            "maior": self._maior,
            "setx": self._setx,
            "removerl": self._removerl,
            "sols": self._sols,
        }

    def _say(self, text):
        self.out.write(f"{text}\n")

    def _complain(self, text):
        self.err.write(f"{text}\n")

    def _perror(self, label, exc):
        self.err.write(f"{label}: {exc.strerror or exc}\n")

    def builtin(self, args):
        """Run ``args`` if it is a built-in command; return whether it was."""
        name = args[0]
        if name == "sair":
            raise SystemExit(0)
        if name.startswith("42"):
            self._say("42 is the answer to life the universe and everything")
            return True
        if name == "obterinfo":
            return self._obterinfo(args) is not False
        if len(name) > 4 and name.startswith("PS1="):
            self.prompt = name[4:]
            return True
        handler = self._commands.get(name)
        if handler is None:
            return False
        return handler(args) is not False

    def _obterinfo(self, args):
        self._say(VERSION_TEXT)

    def _quemsoueu(self, args):
        try:
            result = subprocess.run(["id"], capture_output=True, text=True)
        except OSError as exc:
            self._perror("id", exc)
            return
        self.out.write(result.stdout)
        self.err.write(result.stderr)

    def _cd(self, args):
        try:
            current = os.getcwd()
        except OSError as exc:
            self._perror("getcwd", exc)
            return
        target = _arg(args, 1)
        if target is None or target in ("~", "$HOME"):
            destination = os.environ.get("HOME")
            if destination is None:
                self._complain("cd: HOME não definido")
                return
        elif target == "-":
            destination = os.environ.get("OLDPWD")
            if destination is None:
                self._complain("cd: diretório anterior não disponível")
                return
        else:
            destination = target
        try:
            os.chdir(destination)
        except OSError as exc:
            self._perror(target if target is not None else "cd", exc)
            return
        if target == "-":
            self._say(destination)
        os.environ["OLDPWD"] = current
        try:
            os.environ["PWD"] = os.getcwd()
        except OSError:
            pass

    def _socp(self, args):
        source, destination = _arg(args, 1), _arg(args, 2)
        if source is None or destination is None:
            self._say("Syntax Incorreto: Usage: socp fonte destino")
            return
        blksize = _atoi(args[3]) if len(args) > 3 else DEFAULT_BLKSIZE
        try:
            socp(source, destination, blksize)
        except OSError as exc:
            self._perror("Erro na cópia", exc)
        except ValueError as exc:
            self._complain(f"Erro na cópia: {exc}")

    def _calc(self, args):
        if len(args) != 4:
            self._say("Uso correto: calc operando1 operador operando2")
            return
        try:
            self._say(calc(args[1], args[2], args[3]))
        except CalcError as exc:
            self._say(str(exc))

    def _bits(self, args):
        op1, op, op2 = _arg(args, 1), _arg(args, 2), _arg(args, 3)
        if (
            op1 is None
            or op is None
            or (op2 is None and not op.startswith("~"))
            or len(args) > 4
        ):
            self._say("Uso: bits operando1 operador operando2")
            return
        try:
            self._say(bits(op1, op, op2))
        except CalcError as exc:
            self._say(str(exc))

    def _isjpeg(self, args):
        name = _arg(args, 1)
        if name is None:
            self._say("Uso: isjpeg nome_do_ficheiro.jpg")
            return
        try:
            fd = open_file(name)
        except OSError as exc:
            self._perror("Erro ao abrir o ficheiro", exc)
            return
        try:
            if is_jpeg(fd):
                self._say(f"O ficheiro {name} é JPEG válido.")
            else:
                self._say(f"O ficheiro {name} NÃO é JPEG.")
        finally:
            os.close(fd)

    def _is_valid(self, args):
        text = _arg(args, 1)
        if text is not None:
            state = "" if fd_is_valid(_atoi(text)) else "não"
            self._say(f"{text} é {state} válido")

    def _read(self, args):
        if len(args) > 2:
            try:
                data = read_fd(_atoi(args[1]), _atoi(args[2]))
            except OSError as exc:
                self._perror("Erro ao ler", exc)
                return
            except ValueError as exc:
                self._complain(f"Erro ao ler: {exc}")
                return
            self._say(format_bytes(data))

    def _fileinfo(self, args):
        self.out.flush()
        self.out.write(file_info())

    def _closefd(self, args):
        text = _arg(args, 1)
        if text is None:
            return
        fd = _atoi(text)
        try:
            close_fd(fd)
        except OSError as exc:
            self._perror("closefd falhou", exc)
        else:
            self._say(f"Descritor {fd} fechado com sucesso")

    def _openfile(self, args):
        name = _arg(args, 1)
        if name is None:
            return
        try:
            fd = open_file(name)
        except OSError as exc:
            self._perror(name, exc)
        else:
            self._say(f"Aberto {name} para leitura com descritor fd {fd}")

    def _display_bit_ops(self, args):
        if len(args) < 3:
            self._say("Uso: displayBitOps <um> <dois>")
            return
        um = _atoi(args[1]) & _USHORT
        dois = _atoi(args[2]) & _USHORT
        self.out.write(display_bit_ops(um, dois))

    def _avisotemp(self, args):
        message, seconds = _arg(args, 1), _arg(args, 2)
        if message is None or seconds is None:
            self._complain("Erro: argumentos insuficientes.")
            return
        self._say(f'Agendado aviso temporizado: "{message}" em {seconds} segundos')
        self.out.flush()
        aviso(message, _atoi(seconds), self.err)

    def _aviso_thread(self, args):
        message, seconds = _arg(args, 1), _arg(args, 2)
        if message is None or seconds is None:
            self._complain("Erro: argumentos insuficientes.")
            return
        start_aviso(message, _atoi(seconds))

    def _socpthread(self, args):
        source, destination = _arg(args, 1), _arg(args, 2)
        if source is None or destination is None:
            self._complain("Erro: argumentos insuficientes.")
            return
        blksize = _atoi(args[3]) if len(args) > 3 else DEFAULT_BLKSIZE
        start_copy(self.copy_log, source, destination, blksize)

    def _info_copias(self, args):
        self.out.write(self.copy_log.report())

    def _maior(self, args):
        if len(args) < 3:
            return False
        try:
            self._say(larger_file(args[1], args[2]))
        except OSError as exc:
            self._perror("Erro ao aceder ao ficheiro", exc)

    def _setx(self, args):
        if len(args) < 2:
            return False
        try:
            self._say(set_owner_exec(args[1]))
        except OSError as exc:
            self._perror("Erro ao alterar permissões", exc)

    def _removerl(self, args):
        if len(args) < 2:
            return False
        try:
            self._say(remove_group_other_read(args[1]))
        except OSError as exc:
            self._perror("Erro ao remover permissões de leitura", exc)

    def _sols(self, args):
        try:
            self.out.write(list_directory(_arg(args, 1)))
        except OSError as exc:
            self._perror("Erro ao abrir diretoria", exc)

    def handle_line(self, line):
        """Parse and run one command line."""
        args = parse(line.rstrip("\n"))
        if not args:
            return
        if self.builtin(args):
            return
        self.out.flush()
        try:
            job = execute(args)
        except ValueError as exc:
            self._complain(str(exc))
            return
        if job.background and job.pid is not None:
            self._say(f"[BG] Processo iniciado com PID: {job.pid}")

    def run(self, stdin):
        """Read and run lines from ``stdin`` until end of input or ``sair``."""
        while True:
            self.out.write(self.prompt)
            self.out.flush()
            line = stdin.readline()
            if not line:
                self.out.write("\n")
                return 0
            try:
                self.handle_line(line)
            except SystemExit as exc:
                return exc.code if exc.code is not None else 0


def main(argv=None):
    """Start an interactive session on standard input."""
    return Shell().run(sys.stdin)