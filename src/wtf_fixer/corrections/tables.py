"""Built-in reference data for the correction engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TypoFix:
    """A built-in typo with its canonical replacement."""

    typo: str
    fix: str
    reason: str


@dataclass(frozen=True)
class ReferenceTables:
    """Read-only tables consulted by ``find_corrections``."""

    typos: tuple[TypoFix, ...]
    common_commands: tuple[str, ...]


BUILTIN_TYPOS: tuple[TypoFix, ...] = (
    # git
    TypoFix("gti", "git", "transposed letters"),
    TypoFix("igt", "git", "transposed letters"),
    TypoFix("got", "git", "adjacent key typo"),
    TypoFix("gut", "git", "adjacent key typo"),
    TypoFix("gitp", "git", "extra letter"),
    TypoFix("git stauts", "git status", "transposed letters"),
    TypoFix("git statsu", "git status", "transposed letters"),
    TypoFix("git statuus", "git status", "doubled letter"),
    TypoFix("git stats", "git status", "missing letter"),
    TypoFix("git comit", "git commit", "missing letter"),
    TypoFix("git commti", "git commit", "transposed letters"),
    TypoFix("git psuh", "git push", "transposed letters"),
    TypoFix("git puhs", "git push", "transposed letters"),
    TypoFix("git pul", "git pull", "missing letter"),
    TypoFix("git plul", "git pull", "transposed letters"),
    TypoFix("git chekcout", "git checkout", "transposed letters"),
    TypoFix("git checkotu", "git checkout", "transposed letters"),
    TypoFix("git brnach", "git branch", "transposed letters"),
    TypoFix("git branhc", "git branch", "transposed letters"),
    TypoFix("git ad", "git add", "missing letter"),
    TypoFix("git dif", "git diff", "missing letter"),
    TypoFix("git lgo", "git log", "transposed letters"),
    TypoFix("git merg", "git merge", "missing letter"),
    TypoFix("git rebsae", "git rebase", "transposed letters"),
    TypoFix("git fecth", "git fetch", "transposed letters"),
    TypoFix("git clnoe", "git clone", "transposed letters"),
    # filesystem
    TypoFix("sl", "ls", "reversed command"),
    TypoFix("l", "ls", "missing letter"),
    TypoFix("ll", "ls -l", "missing alias"),
    TypoFix("la", "ls -a", "missing alias"),
    TypoFix("cd..", "cd ..", "missing space"),
    TypoFix("cd-", "cd -", "missing space"),
    TypoFix("mkidr", "mkdir", "transposed letters"),
    TypoFix("mkdri", "mkdir", "transposed letters"),
    TypoFix("rmdri", "rmdir", "transposed letters"),
    TypoFix("tocuh", "touch", "transposed letters"),
    TypoFix("touhc", "touch", "transposed letters"),
    TypoFix("cta", "cat", "transposed letters"),
    TypoFix("act", "cat", "transposed letters"),
    TypoFix("grpe", "grep", "transposed letters"),
    TypoFix("gerp", "grep", "transposed letters"),
    TypoFix("fidn", "find", "transposed letters"),
    TypoFix("claer", "clear", "transposed letters"),
    TypoFix("clera", "clear", "transposed letters"),
    TypoFix("cler", "clear", "missing letter"),
    TypoFix("ecoh", "echo", "transposed letters"),
    TypoFix("ehco", "echo", "transposed letters"),
    TypoFix("pdw", "pwd", "transposed letters"),
    TypoFix("cp-r", "cp -r", "missing space"),
    TypoFix("rm-rf", "rm -rf", "missing space"),
    # privilege and packages
    TypoFix("sduo", "sudo", "transposed letters"),
    TypoFix("suod", "sudo", "transposed letters"),
    TypoFix("sudp", "sudo", "adjacent key typo"),
    TypoFix("apt-gte", "apt-get", "transposed letters"),
    TypoFix("atp", "apt", "transposed letters"),
    TypoFix("brwe", "brew", "transposed letters"),
    TypoFix("pip3 isntall", "pip3 install", "transposed letters"),
    TypoFix("pip isntall", "pip install", "transposed letters"),
    TypoFix("pip instal", "pip install", "missing letter"),
    # languages and tooling
    TypoFix("pyhton", "python", "transposed letters"),
    TypoFix("pytohn", "python", "transposed letters"),
    TypoFix("pyton", "python", "missing letter"),
    TypoFix("pthon", "python", "missing letter"),
    TypoFix("pyhton3", "python3", "transposed letters"),
    TypoFix("ndoe", "node", "transposed letters"),
    TypoFix("nmp", "npm", "transposed letters"),
    TypoFix("npm isntall", "npm install", "transposed letters"),
    TypoFix("npm instal", "npm install", "missing letter"),
    TypoFix("npm rnu", "npm run", "transposed letters"),
    TypoFix("yran", "yarn", "transposed letters"),
    TypoFix("carg", "cargo", "missing letter"),
    TypoFix("cargo biuld", "cargo build", "transposed letters"),
    TypoFix("cargo rnu", "cargo run", "transposed letters"),
    TypoFix("mkae", "make", "transposed letters"),
    TypoFix("maek", "make", "transposed letters"),
    TypoFix("dokcer", "docker", "transposed letters"),
    TypoFix("docekr", "docker", "transposed letters"),
    TypoFix("dcoker", "docker", "transposed letters"),
    TypoFix("docker-compsoe", "docker-compose", "transposed letters"),
    TypoFix("kubeclt", "kubectl", "transposed letters"),
    TypoFix("kubetcl", "kubectl", "transposed letters"),
    TypoFix("vmi", "vim", "transposed letters"),
    TypoFix("ivm", "vim", "transposed letters"),
    TypoFix("nvmi", "nvim", "transposed letters"),
    TypoFix("nanp", "nano", "adjacent key typo"),
    TypoFix("sssh", "ssh", "doubled letter"),
    TypoFix("shh", "ssh", "transposed letters"),
    TypoFix("cul", "curl", "missing letter"),
    TypoFix("crul", "curl", "transposed letters"),
    TypoFix("wegt", "wget", "transposed letters"),
    TypoFix("exti", "exit", "transposed letters"),
    TypoFix("eixt", "exit", "transposed letters"),
)

COMMON_COMMANDS: tuple[str, ...] = (
    "git",
    "ls",
    "cd",
    "pwd",
    "cat",
    "echo",
    "grep",
    "find",
    "mkdir",
    "rmdir",
    "touch",
    "cp",
    "mv",
    "rm",
    "chmod",
    "chown",
    "clear",
    "exit",
    "history",
    "less",
    "head",
    "tail",
    "sudo",
    "apt",
    "apt-get",
    "brew",
    "pip",
    "pip3",
    "python",
    "python3",
    "node",
    "npm",
    "npx",
    "yarn",
    "cargo",
    "rustc",
    "go",
    "make",
    "docker",
    "docker-compose",
    "kubectl",
    "helm",
    "terraform",
    "vim",
    "nvim",
    "nano",
    "code",
    "ssh",
    "scp",
    "rsync",
    "curl",
    "wget",
    "tar",
    "unzip",
    "systemctl",
    "journalctl",
    "ps",
    "kill",
    "top",
    "htop",
    "df",
    "du",
    "ping",
    "which",
    "export",
    "source",
)

BUILTIN_TABLES = ReferenceTables(typos=BUILTIN_TYPOS, common_commands=COMMON_COMMANDS)


def is_builtin_typo(wrong: str, correct: str, tables: ReferenceTables = BUILTIN_TABLES) -> bool:
    """Check whether a pair overlaps the built-in typo table."""
    return any(entry.typo == wrong or entry.fix == correct for entry in tables.typos)
