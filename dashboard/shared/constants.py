"""Shared constants for the F1 dashboard."""

from __future__ import annotations

from .data.types import SessionKind

F1_RED = "#E10600"

DEFAULT_TEAM_COLOUR = "808080"
DEFAULT_DRIVER_IMAGE = (
    "https://www.formula1.com/etc/designs/fom-website/images/f1_default_driver.png"
)

SESSION_LABELS: dict[SessionKind, str] = {
    SessionKind.FP1: "FP1",
    SessionKind.FP2: "FP2",
    SessionKind.FP3: "FP3",
    SessionKind.QUALIFYING: "Qualifying",
    SessionKind.SPRINT_QUALIFYING: "Sprint Qualifying",
    SessionKind.SPRINT: "Sprint",
    SessionKind.RACE: "Race",
}

# Team colours without the leading '#', as the OpenF1 roster reports them.
TEAM_COLOURS: dict[str, str] = {
    "Red Bull": "3671C6",
    "Mercedes": "27F4D2",
    "Ferrari": "E80020",
    "McLaren": "FF8000",
    "Aston Martin": "229971",
    "Alpine": "0093CC",
    "Williams": "64C4FF",
    "RB F1 Team": "6692FF",
    "Racing Bulls": "6692FF",
    "Kick Sauber": "52E252",
    "Sauber": "52E252",
    "Haas F1 Team": "B6BABD",
}

TEAM_DISPLAY_NAMES: dict[str, str] = {
    "RB F1 Team": "Visa Cash App RB",
    "Kick Sauber": "Stake F1 Team Kick Sauber",
    "Haas F1 Team": "MoneyGram Haas F1 Team",
    "Aston Martin": "Aston Martin Aramco",
    "Alpine F1 Team": "BWT Alpine F1 Team",
}

# Mid-season moves the standings feed has not caught up with.
DRIVER_TEAM_OVERRIDES: dict[str, str] = {
    "tsunoda": "Red Bull",
    "lawson": "RB F1 Team",
    "doohan": "Alpine",
}

_MEDIA = "https://media.formula1.com/d_driver_fallback_image.png/content/dam/fom-website/drivers"

DRIVER_IMAGES: dict[str, str] = {
    "max_verstappen": f"{_MEDIA}/M/MAXVER01_Max_Verstappen/maxver01.png.transform/2col/image.png",
    "perez": f"{_MEDIA}/S/SERPER01_Sergio_Perez/serper01.png.transform/2col/image.png",
    "hamilton": f"{_MEDIA}/L/LEWHAM01_Lewis_Hamilton/lewham01.png.transform/2col/image.png",
    "russell": f"{_MEDIA}/G/GEORUS01_George_Russell/georus01.png.transform/2col/image.png",
    "leclerc": f"{_MEDIA}/C/CHALEC01_Charles_Leclerc/chalec01.png.transform/2col/image.png",
    "sainz": f"{_MEDIA}/C/CARSAI01_Carlos_Sainz/carsai01.png.transform/2col/image.png",
    "norris": f"{_MEDIA}/L/LANNOR01_Lando_Norris/lannor01.png.transform/2col/image.png",
    "piastri": f"{_MEDIA}/O/OSCPIA01_Oscar_Piastri/oscpia01.png.transform/2col/image.png",
    "alonso": f"{_MEDIA}/F/FERALO01_Fernando_Alonso/feralo01.png.transform/2col/image.png",
    "stroll": f"{_MEDIA}/L/LANSTR01_Lance_Stroll/lanstr01.png.transform/2col/image.png",
    "gasly": f"{_MEDIA}/P/PIEGAS01_Pierre_Gasly/piegas01.png.transform/2col/image.png",
    "ocon": f"{_MEDIA}/E/ESTOCO01_Esteban_Ocon/estoco01.png.transform/2col/image.png",
    "albon": f"{_MEDIA}/A/ALEALB01_Alexander_Albon/alealb01.png.transform/2col/image.png",
    "colapinto": f"{_MEDIA}/F/FRACOL01_Franco_Colapinto/fracol01.png.transform/2col/image.png",
    "tsunoda": f"{_MEDIA}/Y/YUKTSU01_Yuki_Tsunoda/yuktsu01.png.transform/2col/image.png",
    "lawson": f"{_MEDIA}/L/LIALAW01_Liam_Lawson/lialaw01.png.transform/2col/image.png",
    "bottas": f"{_MEDIA}/V/VALBOT01_Valtteri_Bottas/valbot01.png.transform/2col/image.png",
    "zhou": f"{_MEDIA}/G/GUAZHO01_Guanyu_Zhou/guazho01.png.transform/2col/image.png",
    "hulkenberg": f"{_MEDIA}/N/NICHUL01_Nico_Hulkenberg/nichul01.png.transform/2col/image.png",
    "magnussen": f"{_MEDIA}/K/KEVMAG01_Kevin_Magnussen/kevmag01.png.transform/2col/image.png",
    "bearman": f"{_MEDIA}/O/OLIBEA01_Oliver_Bearman/olibea01.png.transform/2col/image.png",
    "doohan": f"{_MEDIA}/J/JACDOO01_Jack_Doohan/jacdoo01.png.transform/2col/image.png",
    "hadjar": f"{_MEDIA}/I/ISAHAD01_Isack_Hadjar/isahad01.png.transform/2col/image.png",
    "bortoleto": f"{_MEDIA}/G/GABBOR01_Gabriel_Bortoleto/gabbor01.png.transform/2col/image.png",
    "antonelli": (
        "https://media.formula1.com/image/upload/c_fill,w_80,h_80,g_north/q_auto/"
        "d_common:f1:2025:fallback:driver:2025fallbackdriverright.webp/v1740000000/"
        "common/f1/2025/mercedes/andant01/2025mercedesandant01right.webp"
    ),
}

PLOTLY_LAYOUT_DEFAULTS = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font_color="#F0F0F0",
    margin=dict(l=40, r=20, t=40, b=40),
)
