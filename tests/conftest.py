import pytest

from beatmap_simplifier.config import ENV_ACTION, ENV_NEW_SECTION, ENV_SECTION, ProcessOptions

RADAR_BEGINNER = "     0.100,0.100,0.000,0.000,0.000:"

SAMPLE_SM = "\n".join([
    "#TITLE:All Honor and Glory;",
    "#ARTIST:Test Artist;",
    "#MUSIC:All Honor and Glory.mp3;",
    "#OFFSET:-0.100;",
    "#BPMS:0.000=120.000;",
    "#STOPS:;",
    "#BGCHANGES:;",
    "#ATTACKS:;",
    "",
    "//---------------dance-single - ----------------",
    "#NOTES:",
    "     dance-single:",
    "     :",
    "     Beginner:",
    "     2:",
    RADAR_BEGINNER,
    "1000",
    "0100",
    "0010",
    "0001",
    ",",
    "2000",
    "0000",
    "3000",
    "0000",
    ";",
    "",
    "//---------------dance-single - ----------------",
    "#NOTES:",
    "     dance-single:",
    "     :",
    "     Easy:",
    "     4:",
    "     0.200,0.200,0.000,0.000,0.000:",
    "1000",
    "0100",
    "0010",
    "0001",
    ";",
    "",
])

# Body of the Beginner chart above, as the locator returns it
BEGINNER_BODY = [
    RADAR_BEGINNER,
    "1000", "0100", "0010", "0001",
    ",",
    "2000", "0000", "3000", "0000",
    ";",
    "",
]

SIMPLIFIED_BEGINNER_BODY = [
    RADAR_BEGINNER,
    "0000", "0100", "0000", "0001",
    ",",
    "0000", "0000", "3000", "0000",
    ";",
    "",
]

ATTACKS_INDEX = 7
BEGINNER_BODY_INDEX = 15


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # setenv then delenv so values loaded from a .env during a test are undone too
    for name in (ENV_SECTION, ENV_ACTION, ENV_NEW_SECTION):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sample_lines():
    return SAMPLE_SM.split("\n")


@pytest.fixture
def chart_file(tmp_path):
    songs = tmp_path / "songs" / "All Honor and Glory"
    songs.mkdir(parents=True)
    path = songs / "All Honor and Glory.mp3.sm"
    path.write_text(SAMPLE_SM, encoding="utf-8")
    return path


@pytest.fixture
def replace_options():
    return ProcessOptions(section_to_extract="Beginner:2", action="Replace", new_section_name="Beginner:2")


@pytest.fixture
def insert_before_options():
    return ProcessOptions(section_to_extract="Beginner:2", action="Insert Before", new_section_name="Novice:1")
