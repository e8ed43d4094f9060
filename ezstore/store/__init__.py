"""Store packages, apps, bundles and files, the display-catalog query and the HTTP client."""