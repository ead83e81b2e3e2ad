"""Ship customization input, validated at the API boundary."""

from pydantic import BaseModel, ConfigDict, Field

from .enums import HullClass


class CustomizationConfig(BaseModel):
    """Loadout chosen in the customization form.

    Accepts both snake_case and the camelCase keys the browser form sends.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    color: str = Field(default="#00ff00", pattern=r"^#[0-9a-fA-F]{6}$")
    hull_type: HullClass = Field(default=HullClass.MEDIUM, alias="hullType")
    shield_capacity: int = Field(default=100, ge=0, alias="shieldCapacity")
    shield_regen: int = Field(default=5, ge=0, alias="shieldRegen")
    weapon_damage_primary: int = Field(default=10, ge=0, alias="weaponDamagePrimary")
    weapon_damage_secondary: int = Field(default=25, ge=0, alias="weaponDamageSecondary")
