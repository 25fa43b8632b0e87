import os
import yaml

ROOT_PATH = os.getcwd()
CONFIG_FILE_PATH = os.environ.get(
    "LAMINOTES_CONFIG", os.path.join(ROOT_PATH, "env.yaml")
)

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    INVITATION_TTL_DAYS = data.get("invitationTtlDays", 7)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    PUBLIC_DOCUMENTS = bool(data.get("PUBLIC_DOCUMENTS", False))
    USER_COLOR_PALETTE = data.get(
        "USER_COLOR_PALETTE",
        [
            "#FF6B6B",
            "#4ECDC4",
            "#45B7D1",
            "#96CEB4",
            "#FFEAA7",
            "#DDA0DD",
            "#98D8C8",
            "#F7DC6F",
        ],
    )
    CONFLICT_POLICY = data.get("CONFLICT_POLICY", "last_writer_wins")
