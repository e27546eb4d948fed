import logging
import subprocess
from pathlib import Path

import jsii
from aws_cdk import BundlingOptions, ILocalBundling
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

logger = logging.getLogger(__name__)

LAYER_SOURCE_PATH = "layers/common_layer"

# 試行する順にインストーラを並べる（uv を優先）
INSTALLERS: list[tuple[str, list[str]]] = [
    ("uv", ["uv", "pip", "install", "-r", "{requirements}", "--target", "{target}"]),
    ("pip", ["pip", "install", "-r", "{requirements}", "-t", "{target}"]),
]


@jsii.implements(ILocalBundling)
class PythonLocalBundling:
    """Docker を使わずローカルで依存ライブラリをインストールする Bundling クラス"""

    def __init__(self, source_path: str) -> None:
        self.source_path = source_path

    def try_bundle(self, output_dir: str, options: BundlingOptions) -> bool:
        """ローカルでバンドリングを試行する。

        Returns:
            True: バンドリング成功（Dockerをスキップ）
            False: バンドリング失敗（Dockerにフォールバック）
        """
        del options  # unused
        requirements_path = Path(self.source_path) / "requirements.txt"
        target_dir = Path(output_dir) / "python"

        if not requirements_path.exists():
            logger.warning("requirements.txt not found: %s", requirements_path)
            return False

        for name, template in INSTALLERS:
            command = [
                arg.format(requirements=requirements_path, target=target_dir)
                for arg in template
            ]
            if self._run(name, [*command, "--quiet"]):
                return True

        logger.warning("Local bundling failed, falling back to Docker")
        return False

    def _run(self, name: str, command: list[str]) -> bool:
        try:
            logger.info("Trying local bundling with %s...", name)
            subprocess.run(command, check=True)
        except FileNotFoundError:
            logger.debug("%s not found", name)
            return False
        except subprocess.CalledProcessError as e:
            logger.debug("%s install failed: %s", name, e)
            return False
        logger.info("Local bundling with %s succeeded", name)
        return True


class Layers(Construct):
    """Lambda Layers Construct（powertools / pydantic の共通レイヤー）"""

    def __init__(self, scope: Construct, id: str) -> None:
        super().__init__(scope, id)

        self.common_layer = _lambda.LayerVersion(
            self,
            "CommonLayer",
            code=_lambda.Code.from_asset(
                LAYER_SOURCE_PATH,
                bundling=BundlingOptions(
                    image=_lambda.Runtime.PYTHON_3_14.bundling_image,
                    command=[
                        "bash",
                        "-c",
                        "pip install -r requirements.txt -t /asset-output/python",
                    ],
                    local=PythonLocalBundling(LAYER_SOURCE_PATH),
                ),
            ),
            compatible_runtimes=[_lambda.Runtime.PYTHON_3_14],
            description="Front desk common dependencies",
        )
