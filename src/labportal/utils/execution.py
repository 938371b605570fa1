"""
Execution gateway for the remote Piston API.

Callers hand in a plain language label ("Python", "C++", ...), source code and
stdin. The gateway discovers the runtimes the remote service offers, picks the
matching (language, version) pair and returns the program output. Sandboxing,
time limits and isolation all happen on the remote side.
"""
import logging
import threading
from typing import Dict, List, Optional

import httpx

from ..config.settings import EXECUTION_API_URL, EXECUTION_TIMEOUT_SEC
from .errors import ExecutionError, RuntimeNotFoundError, UnsupportedLanguageError

logger = logging.getLogger(__name__)

# Label shown to users -> Piston language name
LANGUAGE_MAP: Dict[str, str] = {
    "Python": "python",
    "Java": "java",
    "C": "c",
    "C++": "c++",
}

FILE_NAMES: Dict[str, str] = {
    "Python": "main.py",
    "Java": "Main.java",
    "C": "main.c",
    "C++": "main.cpp",
}

# Used when the runtime listing can't be fetched
FALLBACK_RUNTIMES: List[dict] = [
    {"language": "python", "version": "3.10.0", "aliases": ["py"]},
    {"language": "java", "version": "15.0.2", "aliases": []},
    {"language": "c", "version": "10.2.0", "aliases": ["gcc"]},
    {"language": "c++", "version": "10.2.0", "aliases": ["cpp", "g++"]},
]

STARTER_TEMPLATES: Dict[str, str] = {
    "Python": (
        "# Write your solution here\n"
        "# Input provided via the \"Input\" tab below\n"
        "name = input(\"Enter name: \")\n"
        "print(f\"Hello {name}\")"
    ),
    "Java": (
        "import java.util.Scanner;\n\n"
        "public class Main {\n"
        "    public static void main(String[] args) {\n"
        "        Scanner scanner = new Scanner(System.in);\n"
        "        if(scanner.hasNext()) {\n"
        "            String input = scanner.next();\n"
        "            System.out.println(\"Read: \" + input);\n"
        "        }\n"
        "    }\n"
        "}"
    ),
    "C": (
        "#include <stdio.h>\n\n"
        "int main() {\n"
        "    int num;\n"
        "    if(scanf(\"%d\", &num)) {\n"
        "        printf(\"Read number: %d\", num);\n"
        "    }\n"
        "    return 0;\n"
        "}"
    ),
    "C++": (
        "#include <iostream>\n\n"
        "int main() {\n"
        "    int num;\n"
        "    if(std::cin >> num) {\n"
        "        std::cout << \"Read number: \" << num;\n"
        "    }\n"
        "    return 0;\n"
        "}"
    ),
}


class ExecutionGateway:
    def __init__(
        self,
        base_url: str = EXECUTION_API_URL,
        timeout: float = EXECUTION_TIMEOUT_SEC,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Args:
            base_url: Piston API root, e.g. https://emkc.org/api/v2/piston
            timeout: seconds allowed for each remote call
            transport: optional httpx transport (tests pass a MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport
        self._runtimes: List[dict] = []
        self._runtimes_lock = threading.Lock()

    def _client(self) -> httpx.Client:
        return httpx.Client(base_url=self.base_url, timeout=self.timeout, transport=self.transport)

    def runtimes(self) -> List[dict]:
        """
        Runtime list of the remote service, fetched once per process.

        A failed fetch returns FALLBACK_RUNTIMES without caching them, so the
        next call tries the remote listing again.
        """
        if self._runtimes:
            return self._runtimes
        with self._runtimes_lock:
            if self._runtimes:
                return self._runtimes
            try:
                with self._client() as client:
                    response = client.get("/runtimes")
                    response.raise_for_status()
                    data = response.json()
                if not isinstance(data, list):
                    raise ValueError("runtime listing is not a list")
                self._runtimes = data
                logger.info(f"Loaded {len(data)} runtimes from {self.base_url}")
                return self._runtimes
            except (httpx.HTTPError, ValueError) as e:
                logger.warning(f"Runtime listing failed, using fallback table: {e}")
                return FALLBACK_RUNTIMES

    def resolve_runtime(self, language: str) -> dict:
        piston_lang = LANGUAGE_MAP.get(language)
        if not piston_lang:
            raise UnsupportedLanguageError(language)

        runtimes = self.runtimes()
        for runtime in runtimes:
            if runtime.get("language") == piston_lang:
                return runtime
        for runtime in runtimes:
            if piston_lang in (runtime.get("aliases") or []):
                return runtime
        raise RuntimeNotFoundError(language)

    def execute(self, language: str, source_code: str, stdin: str = "") -> dict:
        """Run source_code remotely and return {"output": ...}."""
        runtime = self.resolve_runtime(language)
        payload = {
            "language": runtime["language"],
            "version": runtime["version"],
            "files": [{"name": FILE_NAMES[language], "content": source_code}],
            "stdin": stdin,
        }
        logger.info(f"Executing {language} ({runtime['language']} {runtime['version']})")

        try:
            with self._client() as client:
                response = client.post("/execute", json=payload)
        except httpx.HTTPError as e:
            logger.error(f"Execution request failed: {e}")
            raise ExecutionError(str(e) or "Failed to connect to execution engine.") from e

        try:
            result = response.json()
        except ValueError:
            result = {}
        if not isinstance(result, dict):
            result = {}

        if response.is_error:
            raise ExecutionError(result.get("message") or "Execution failed")

        run = result.get("run")
        if isinstance(run, dict):
            return {"output": run.get("output", "")}
        compile_stage = result.get("compile")
        if isinstance(compile_stage, dict):
            return {"output": compile_stage.get("output", "")}
        raise ExecutionError(result.get("message") or "Unknown error occurred")

    def languages(self) -> List[dict]:
        return [
            {"language": label, "file_name": FILE_NAMES[label], "template": STARTER_TEMPLATES[label]}
            for label in LANGUAGE_MAP
        ]


# Process-wide instance; its runtime cache lives as long as the process
execution_gateway = ExecutionGateway()


def get_execution_gateway() -> ExecutionGateway:
    return execution_gateway
