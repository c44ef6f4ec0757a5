from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer

from biotrack.db.database import Base


class Measure(Base):
    __tablename__ = "measures"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    measurement_date = Column(DateTime, nullable=False, index=True)

    # Required measurements
    weight_kg = Column(Float, nullable=False)
    height_cm = Column(Float, nullable=False)

    # Optional measurements (NULL = not measured)
    waist_cm = Column(Float, nullable=True)
    hip_cm = Column(Float, nullable=True)
    chest_cm = Column(Float, nullable=True)
    arm_right_cm = Column(Float, nullable=True)
    arm_left_cm = Column(Float, nullable=True)
    thigh_right_cm = Column(Float, nullable=True)
    thigh_left_cm = Column(Float, nullable=True)
    body_fat_percentage = Column(Float, nullable=True)

    def __repr__(self):
        return (
            f"<Measure id={self.id} user_id={self.user_id} "
            f"measurement_date={self.measurement_date}>"
        )
