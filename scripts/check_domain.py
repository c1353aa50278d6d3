#!/usr/bin/env python3
import argparse
import json

from siteo.services.vercel_service import VercelAPIError, VercelClient, VercelNotConfiguredError


def main() -> int:
    parser = argparse.ArgumentParser(description='Print hosting-provider status for a custom domain.')
    parser.add_argument('domain', help='Custom domain to inspect, e.g. example-realty.com')
    parser.add_argument('--no-verify', action='store_true', help='Do not trigger verification for unverified domains.')
    args = parser.parse_args()

    try:
        vercel = VercelClient.from_settings()
    except VercelNotConfiguredError:
        raise SystemExit('VERCEL_AUTH_TOKEN and VERCEL_PROJECT_ID are required.')

    domain = args.domain.strip().lower()
    print(f'--- Checking Domain: {domain} ---')
    try:
        data = vercel.get_domain_status(domain)
        if data is None:
            print('Domain is not attached to the project.')
            return 1

        print('Verified:', data.get('verified'))
        if data.get('verified'):
            print('Domain is verified.')
            return 0

        print('Verification Info:', json.dumps(data.get('verification'), indent=2))
        if args.no_verify:
            return 0

        print('\n--- Triggering Verification ---')
        print('Verify Data:', json.dumps(vercel.verify_domain(domain), indent=2))
    except VercelAPIError as exc:
        print(f'Error ({exc.status_code}):', exc)
        if exc.details:
            print(json.dumps(exc.details, indent=2))
        return 1
    finally:
        vercel.close()
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
