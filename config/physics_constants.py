import numpy as np




R = 8.3145


F = 96485.0


P_ATM = 101325.0




class SOFCParams:

    E_NERNST = 1.229


    n_electrons = 4


    alpha = 0.5


    area_resistance = 0.1


    class Operating:

        T_kelvin = 973.15


        # Temperature behind the recorded reference voltages
        T_kelvin_reference = 973.0
        reference_voltages = {1.0: 4.030645268779439, 2.5: 3.5733182639768324}


        current_densities = [1.0, 2.5]


    class Cathode:

        x_O2 = 0.18


        D_eff = 3.66e-7


        delta = 10e-6


    class Anode:

        x_CH4 = 0.60


        D_eff = 9.66e-7


        delta = 200e-6


    class Kinetics:

        i0_prefactor_cathode = 3.8e6
        i0_prefactor_anode = 1.3e7


        T_activation_cathode = 8170.0
        T_activation_anode = 8427.0




# Model current densities are expressed in A/cm²
CURRENT_DENSITY_UNITS = {
    "A/cm2": 1.0,
    "mA/cm2": 1e-3,
    "A/m2": 1e-4,
}




def kelvin_to_celsius(T_kelvin: float) -> float:
    return T_kelvin - 273.15


def ideal_gas_concentration(p: float, T: float, R_gas: float = R) -> float:
    return p / (R_gas * T)


def arrhenius_i0(prefactor: float, T_activation: float, T: float, C: float) -> float:
    return prefactor * np.exp(-T_activation / T) * C




VALIDATION_BOUNDS = {
    "SOFC": {
        "temperature": (773.15, 1273.15),
        "transfer_coefficient": (0.0, 1.0),
        "area_resistance": (0.0, 1.0),
        "current_density": (0.0, 5.0),
    }
}
