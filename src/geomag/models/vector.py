import numpy as np
from scipy.spatial.transform import Rotation as R

from .field import FieldVector

def to_vector(intensity: float, declination_deg: float,
              inclination_deg: float) -> FieldVector:
    """
    Convert magnetic elements into a North-East-Down field vector.

    The intensity along north is rotated by the declination about Down
    (yaw) and by minus the inclination about East (pitch), giving

        North = I * cos(Inc) * cos(D)
        East  = I * cos(Inc) * sin(D)
        Down  = I * sin(Inc)

    Args:
        intensity: Field magnitude [Gauss]
        declination_deg: Declination [deg], positive east
        inclination_deg: Inclination [deg], positive down

    Returns:
        FieldVector [Gauss]
    """
    rotation = R.from_euler('ZYX', [declination_deg, -inclination_deg, 0.0], degrees=True)
    north, east, down = rotation.apply(np.array([intensity, 0.0, 0.0]))
    return FieldVector(float(north), float(east), float(down))
