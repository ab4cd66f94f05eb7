import config
from secretweave.codec import decode, to_decimal
from secretweave.entities import InputRecord, Point
from secretweave.errors import InterpolationError
from secretweave.interpolation import interpolate_at_zero

def _format_point(point):
    return f"({to_decimal(point.x)}, {to_decimal(point.y)})"

class ShamirSecretReconstruction:
    """Recovers the constant term of a share polynomial over the integers"""

    def __init__(self, log=None):
        # Progress messages go to an injected callable; none are built without one
        self.log = log

    def decode_points(self, record: InputRecord) -> list:
        """Decode every share of the record into an exact point"""
        if self.log and record.n != len(record.shares):
            self.log(f"Record declares n = {to_decimal(record.n)} but holds {len(record.shares)} shares")

        points = []
        for share in record.shares:
            x = decode(share.key, config.Config.SHARE_X_BASE)
            y = decode(share.digits, share.base)
            points.append(Point(x, y))
            if self.log:
                self.log(f"Point: {_format_point(points[-1])} from \"{share.digits}\" base {share.base}")
        return points

    @staticmethod
    def select_points(points: list, threshold: int) -> list:
        """First threshold points by ascending x; the rest are discarded"""
        return sorted(points, key=lambda point: point.x)[:threshold]

    def reconstruct(self, record):
        """Return the secret together with the points it was interpolated from"""
        if not isinstance(record, InputRecord):
            record = InputRecord.from_dict(record)
        if self.log:
            self.log(f"n = {to_decimal(record.n)}, k = {to_decimal(record.k)}")

        points = self.decode_points(record)
        if len(points) < record.k:
            raise InterpolationError(
                f"Not enough points. Need {to_decimal(record.k)}, got {len(points)}",
                x_values=[point.x for point in points]
            )

        selected = self.select_points(points, record.k)
        if self.log:
            self.log(f"Using {len(selected)} points for interpolation: "
                     + ", ".join(_format_point(p) for p in selected))

        secret = interpolate_at_zero(selected)
        if self.log:
            self.log(f"Constant (c): {to_decimal(secret)}")
        return secret, selected

    def recover_secret(self, record) -> int:
        """Recover secret from a record using Lagrange interpolation at zero"""
        secret, _ = self.reconstruct(record)
        return secret
